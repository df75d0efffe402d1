import logging
import time
from typing import Optional, Tuple

from .board import Board
from .cell import Side
from .errors import GameException, SearchError
from .evaluator import WINNING_VALUE, Evaluator
from .utils import format_info

INF = WINNING_VALUE

logger = logging.getLogger(__name__)


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: int = 3,
                 maximizing: Side = Side.RED):
        """
        evaluator.evaluate(board) must return an int, positive when Red is
        better. Values reported by the search are from MAXIMIZING's side.
        depth = search depth in plies.
        """
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        if maximizing is Side.NEUTRAL:
            raise ValueError("the maximizing side must be red or blue")
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth
        self.maximizing = maximizing
        self.nodes = 0
        self._found_move: Optional[int] = None

    # Public API
    def select_move(self, board, side: Side) -> int:
        """Return the square number SIDE should play on BOARD."""
        return self.find_best_move(board, side)[0]

    def find_best_move(self, board, side: Side) -> Tuple[int, int]:
        """
        Returns (square, value). BOARD itself is never modified; the search
        works on a private copy. The game must not be over and SIDE must be
        the side to move.
        """
        if board.get_winner() is not None:
            raise GameException("cannot search a finished game")
        if side is not board.whose_move():
            raise GameException(f"it is not {side}'s move")

        work = Board.from_board(board)
        self.nodes = 0
        self._found_move = None
        sense = 1 if side is self.maximizing else -1

        start_time = time.perf_counter()
        value = self._min_max(work, self.max_depth, True, sense, -INF, INF)
        elapsed = time.perf_counter() - start_time

        if self._found_move is None:
            raise SearchError(f"no move found for {side} on a position without a winner")
        logger.debug(format_info(self.max_depth, value, self.nodes, elapsed,
                                 board.move_string(self._found_move), INF))
        return self._found_move, value

    # -------------------------
    # Minimax with alpha-beta
    # -------------------------
    def _min_max(self, board: Board, depth: int, save_move: bool,
                 sense: int, alpha: int, beta: int) -> int:
        """
        Value of BOARD with the maximizing side to move when SENSE is 1 and
        its opponent when SENSE is -1, searched DEPTH plies deep. Records the
        chosen square in _found_move iff SAVE_MOVE. Depth 0 and finished
        positions return the static value without recording a move.
        """
        self.nodes += 1
        if depth == 0 or board.get_winner() is not None:
            return self._static_value(board)

        player = self.maximizing if sense == 1 else self.maximizing.opponent()
        best_move = None
        best_value = -INF if sense == 1 else INF

        for move in board.legal_moves(player):
            board.add_spot(player, move)
            child = Board.from_board(board)
            board.undo()
            value = self._min_max(child, depth - 1, False, -sense, alpha, beta)

            # Later moves win ties.
            if sense == 1:
                if value >= best_value:
                    best_value = value
                    best_move = move
                alpha = max(alpha, value)
            else:
                if value <= best_value:
                    best_value = value
                    best_move = move
                beta = min(beta, value)

            # The window is closed: a child equal to alpha or beta is still
            # searched exactly, so tie-breaking sees its true value.
            if beta < alpha:
                break

        if save_move:
            self._found_move = best_move
        return best_value

    def _static_value(self, board: Board) -> int:
        value = self.evaluator.evaluate(board)
        return value if self.maximizing is Side.RED else -value
