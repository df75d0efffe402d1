"""Core game components: cells, board, evaluator, and search."""

from .board import Board, ReadonlyBoard
from .cell import Cell, Side
from .errors import GameException, IllegalMoveError, SearchError
from .evaluator import WINNING_VALUE, Evaluator
from .search import SearchEngine
