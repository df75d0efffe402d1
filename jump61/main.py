"""Entry points for collaborators that drive a Jump61 game.

The module-level functions are the contract a game loop, renderer or
player uses against a single Board. Game bundles a board with a search
engine behind one lock, for sessions where a display thread reads the
board while moves are being applied.
"""

import logging
import threading
from typing import Callable, Optional, Tuple

from jump61.config import CONFIG
from jump61.core.board import Board, ReadonlyBoard
from jump61.core.cell import Side
from jump61.core.errors import GameException, IllegalMoveError
from jump61.core.search import SearchEngine

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _engine(depth: Optional[int] = None) -> SearchEngine:
    return SearchEngine(depth=depth or CONFIG.search.depth,
                        maximizing=Side.parse(CONFIG.search.maximizing_side))


def new_board(size: Optional[int] = None) -> Board:
    return Board(size or CONFIG.board.size)


def legal(board, side: Side, r: int, c: Optional[int] = None) -> bool:
    return board.is_legal(side, r, c)


def apply(board, side: Side, r: int, c: Optional[int] = None):
    """Add SIDE's spot to a square. Fails if the move is illegal or the game is won."""
    if board.get_winner() is not None:
        raise IllegalMoveError(f"the game is over: {board.get_winner()} has won")
    board.add_spot(side, r, c)


def undo(board):
    board.undo()


def winner(board) -> Optional[Side]:
    return board.get_winner()


def select_move(board, side: Side, depth: Optional[int] = None) -> int:
    return _engine(depth).select_move(board, side)


def observe(board, callback: Optional[Callable[[Board], None]]):
    """Replace BOARD's change callback; None removes it."""
    board.set_notifier(callback)


class Game:
    def __init__(self, size: Optional[int] = None, depth: Optional[int] = None):
        self._board = new_board(size)
        self.search = _engine(depth)
        self._lock = threading.RLock()

    @property
    def size(self) -> int:
        with self._lock:
            return self._board.size

    def new_game(self, size: Optional[int] = None):
        with self._lock:
            self._board.clear(size or self._board.size)
            size = self._board.size
        logger.info("new %dx%d game", size, size)

    def whose_move(self) -> Side:
        with self._lock:
            return self._board.whose_move()

    def winner(self) -> Optional[Side]:
        with self._lock:
            return self._board.get_winner()

    def is_legal(self, side: Side, r: int, c: Optional[int] = None) -> bool:
        with self._lock:
            return self._board.get_winner() is None and self._board.is_legal(side, r, c)

    def make_move(self, side: Side, r: int, c: Optional[int] = None):
        with self._lock:
            apply(self._board, side, r, c)
            logger.debug("%s played %s", side, self._board.move_string(r, c))
            won = self._board.get_winner()
        if won is not None:
            logger.info("%s wins", won)

    def undo_move(self):
        with self._lock:
            self._board.undo()

    def get_best_move(self) -> Tuple[int, int]:
        """(square, value) for the side to move, searched on a copy of the board."""
        with self._lock:
            if self._board.get_winner() is not None:
                raise GameException("the game is already over")
            search_board = Board.from_board(self._board)
        side = search_board.whose_move()
        return self.search.find_best_move(search_board, side)

    def read_board(self) -> ReadonlyBoard:
        """A read-only copy of the current position, safe to keep while play goes on."""
        with self._lock:
            return Board.from_board(self._board).readonly()

    def set_observer(self, callback: Optional[Callable[[Board], None]]):
        with self._lock:
            observe(self._board, callback)

    def display(self) -> str:
        with self._lock:
            return self._board.to_display_string()

    def print_board(self):
        print(self.display())
