"""Jump61 board: move legality, spot cascades and undo history.

Squares are addressed either by row and column (both between 1 and size),
or by square number, counting rows top to bottom in row-major order from 0
(square n = (col - 1) + (row - 1) * size). Methods taking a square accept
both forms, ``board.get(2, 3)`` or ``board.get(7)``; set() takes row and
column only.
"""

from collections import deque
from typing import Callable, List, NamedTuple, Optional, Tuple

from .cell import NEUTRAL_CELL, Cell, Side
from .errors import GameException, IllegalMoveError

Notifier = Callable[["Board"], None]


def _nop(board):
    pass


class _Snapshot(NamedTuple):
    cells: List[Cell]
    num_moves: int


class Board:
    def __init__(self, size: int = 6):
        """An empty SIZE x SIZE board: every square neutral with one spot."""
        if size < 2:
            raise ValueError(f"board size must be at least 2, got {size}")
        self._size = size
        self._cells: List[Cell] = [NEUTRAL_CELL] * (size * size)
        self._num_moves = 0
        self._history: List[_Snapshot] = []
        self._notifier: Notifier = _nop
        self._readonly: Optional["ReadonlyBoard"] = None

    @classmethod
    def from_board(cls, board0: "Board") -> "Board":
        """A board with BOARD0's contents, an empty undo history and no notifier."""
        board = cls(board0.size)
        board._cells = list(board0.cells())
        return board

    def readonly(self) -> "ReadonlyBoard":
        """Return a read-only view of this board."""
        if self._readonly is None:
            self._readonly = ReadonlyBoard(self)
        return self._readonly

    def clear(self, size: Optional[int] = None):
        """Reset to an empty board (of SIZE, if given) and drop the undo history."""
        size = self._size if size is None else size
        if size < 2:
            raise ValueError(f"board size must be at least 2, got {size}")
        self._size = size
        self._cells = [NEUTRAL_CELL] * (size * size)
        self._num_moves = 0
        self._history.clear()
        self._announce()

    def copy(self, board: "Board"):
        """Copy BOARD's contents into me, clearing my history and move count."""
        if board.size != self.size:
            raise GameException(
                f"cannot copy a {board.size}x{board.size} board "
                f"into a {self.size}x{self.size} board")
        self._cells = list(board.cells())
        self._num_moves = 0
        self._history.clear()

    # ── Addressing ─────────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_moves(self) -> int:
        return self._num_moves

    def exists(self, r: int, c: Optional[int] = None) -> bool:
        """True iff (R, C), or square number R when C is omitted, is on the board."""
        if c is None:
            return 0 <= r < self._size * self._size
        return 1 <= r <= self._size and 1 <= c <= self._size

    def row(self, n: int) -> int:
        return n // self._size + 1

    def col(self, n: int) -> int:
        return n % self._size + 1

    def sq_num(self, r: int, c: int) -> int:
        return (c - 1) + (r - 1) * self._size

    def _square(self, r: int, c: Optional[int]) -> int:
        if not self.exists(r, c):
            where = f"square {r}" if c is None else f"square ({r}, {c})"
            raise GameException(f"{where} is not on a {self._size}x{self._size} board")
        return r if c is None else self.sq_num(r, c)

    def move_string(self, r: int, c: Optional[int] = None) -> str:
        n = self._square(r, c)
        return f"{self.row(n)} {self.col(n)}"

    # ── Queries ────────────────────────────────────────────────────────────

    def get(self, r: int, c: Optional[int] = None) -> Cell:
        return self._cells[self._square(r, c)]

    def cells(self) -> Tuple[Cell, ...]:
        """All cells in square-number order."""
        return tuple(self._cells)

    def num_pieces(self) -> int:
        """Total number of spots on the board."""
        return sum(cell.spots for cell in self._cells)

    def num_of_side(self, side: Side) -> int:
        """Number of squares owned by SIDE."""
        return sum(1 for cell in self._cells if cell.side is side)

    def neighbors(self, r: int, c: Optional[int] = None) -> int:
        """Number of orthogonal neighbors of a square: 2, 3 or 4."""
        n = self._square(r, c)
        return self._neighbor_count(n)

    def _neighbor_count(self, n: int) -> int:
        size = self._size
        r, c = self.row(n), self.col(n)
        return (r > 1) + (c > 1) + (r < size) + (c < size)

    def _adjacent(self, n: int) -> List[int]:
        size = self._size
        r, c = self.row(n), self.col(n)
        adjacent = []
        if r < size:
            adjacent.append(n + size)
        if r > 1:
            adjacent.append(n - size)
        if c < size:
            adjacent.append(n + 1)
        if c > 1:
            adjacent.append(n - 1)
        return adjacent

    def whose_move(self) -> Side:
        """The side to move next. Once the game is won, this is the loser."""
        return Side.RED if (self.num_pieces() + self._size) % 2 == 0 else Side.BLUE

    def is_legal(self, player: Side, r: Optional[int] = None, c: Optional[int] = None) -> bool:
        """True iff PLAYER may move now and, if a square is given, may add a spot to it."""
        if player is not self.whose_move():
            return False
        if r is None:
            return True
        side = self.get(r, c).side
        return side is Side.NEUTRAL or side is player

    def legal_moves(self, player: Side) -> List[int]:
        """Square numbers PLAYER may add a spot to, in increasing order."""
        if player is not self.whose_move():
            return []
        return [n for n, cell in enumerate(self._cells)
                if cell.side is Side.NEUTRAL or cell.side is player]

    def get_winner(self) -> Optional[Side]:
        """The side that owns every square, or None while the game is undecided."""
        first = self._cells[0].side
        if first is Side.NEUTRAL:
            return None
        for cell in self._cells:
            if cell.side is not first:
                return None
        return first

    def can_undo(self) -> bool:
        return bool(self._history)

    # ── Mutation ───────────────────────────────────────────────────────────

    def add_spot(self, player: Side, r: int, c: Optional[int] = None):
        """Add a spot from PLAYER to a square, then resolve any explosions."""
        n = self._square(r, c)
        if not self.is_legal(player, n):
            raise IllegalMoveError(
                f"{player} may not add a spot to {self.move_string(n)}")
        self._mark_undo()
        self._num_moves += 1
        self._cells[n] = Cell(player, self._cells[n].spots + 1)
        self._jump(n)
        self._announce()

    def set(self, r: int, c: int, num: int, player: Side):
        """Place NUM spots of PLAYER at row R, column C, bypassing the rules.

        Neutral squares must hold exactly one spot. The undo history is
        left alone, so this is meant for setting up positions.
        """
        n = self._square(r, c)
        self._cells[n] = Cell.of(player, num)
        self._announce()

    def undo(self):
        """Undo the last add_spot, back to the last clear/copy/construction."""
        if not self._history:
            raise GameException("no move to undo")
        snapshot = self._history.pop()
        self._cells = snapshot.cells
        self._num_moves = snapshot.num_moves
        self._announce()

    def _mark_undo(self):
        self._history.append(_Snapshot(list(self._cells), self._num_moves))

    def _overfull(self, n: int) -> bool:
        return self._cells[n].spots > self._neighbor_count(n)

    def _jump(self, s: int):
        """Resolve explosions, assuming square S is the only one that may be over-full.

        Every explosion in the chain is made in the colour of the player
        who moved. Stops as soon as one side owns the whole board.
        """
        if self.get_winner() is not None:
            return
        initial = self._cells[s].side
        queue = deque()
        if self._overfull(s):
            queue.append(s)
        while queue and self.get_winner() is None:
            n = queue.popleft()
            if not self._overfull(n):
                continue
            adjacent = self._adjacent(n)
            for q in adjacent:
                self._cells[q] = Cell(initial, self._cells[q].spots + 1)
            for q in adjacent:
                if self._overfull(q) and q not in queue:
                    queue.append(q)
            self._cells[n] = Cell(initial, self._cells[n].spots - len(adjacent))

    def set_notifier(self, notify: Optional[Notifier]):
        """Call NOTIFY with this board now and whenever its contents change."""
        self._notifier = notify or _nop
        self._announce()

    def _announce(self):
        self._notifier(self)

    # ── Rendering ──────────────────────────────────────────────────────────

    def __str__(self):
        lines = ["==="]
        for r in range(self._size):
            row = self._cells[r * self._size:(r + 1) * self._size]
            lines.append("    " + " ".join(str(cell) for cell in row))
        lines.append("===")
        return "\n".join(lines)

    def to_display_string(self) -> str:
        """Rows labelled with row numbers, followed by a column-number footer."""
        lines = []
        for r in range(self._size):
            row = self._cells[r * self._size:(r + 1) * self._size]
            lines.append(f"{r + 1:2d} " + " ".join(str(cell) for cell in row))
        lines.append("  " + "".join(f"{c:3d}" for c in range(1, self._size + 1)))
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, (Board, ReadonlyBoard)):
            return NotImplemented
        return self.size == other.size and self.cells() == other.cells()

    __hash__ = None


class ReadonlyBoard:
    """A view of a Board that answers queries but refuses every mutation."""

    def __init__(self, board: Board):
        self._board = board

    size = property(lambda self: self._board.size)
    num_moves = property(lambda self: self._board.num_moves)

    def get(self, r, c=None):
        return self._board.get(r, c)

    def cells(self):
        return self._board.cells()

    def exists(self, r, c=None):
        return self._board.exists(r, c)

    def row(self, n):
        return self._board.row(n)

    def col(self, n):
        return self._board.col(n)

    def sq_num(self, r, c):
        return self._board.sq_num(r, c)

    def move_string(self, r, c=None):
        return self._board.move_string(r, c)

    def num_pieces(self):
        return self._board.num_pieces()

    def num_of_side(self, side):
        return self._board.num_of_side(side)

    def neighbors(self, r, c=None):
        return self._board.neighbors(r, c)

    def whose_move(self):
        return self._board.whose_move()

    def is_legal(self, player, r=None, c=None):
        return self._board.is_legal(player, r, c)

    def legal_moves(self, player):
        return self._board.legal_moves(player)

    def get_winner(self):
        return self._board.get_winner()

    def can_undo(self):
        return self._board.can_undo()

    def to_display_string(self):
        return self._board.to_display_string()

    def __str__(self):
        return str(self._board)

    def __eq__(self, other):
        if not isinstance(other, (Board, ReadonlyBoard)):
            return NotImplemented
        return self.size == other.size and self.cells() == other.cells()

    __hash__ = None

    def _refuse(self, *args, **kwargs):
        raise GameException("board is read-only")

    add_spot = set = undo = clear = copy = set_notifier = _refuse
