"""Exceptions raised by the board and the search engine.

All of them signal a broken calling contract rather than a game event:
callers are expected to check legality and the winner before acting.
"""


class GameException(Exception):
    """A precondition of a Board or search operation was violated."""


class IllegalMoveError(GameException):
    """A spot was added where the side to move may not play."""


class SearchError(GameException):
    """The search finished without recording a candidate move."""
