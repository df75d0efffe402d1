from .cell import Side

# Score of a board Red owns outright; Blue's win scores the negation.
# Also the bound of the search window, so no material count can reach it.
WINNING_VALUE = 2 ** 31 - 1


class Evaluator:
    """Static estimate of a position, positive when Red is ahead."""

    def evaluate(self, board) -> int:
        winner = board.get_winner()
        if winner is Side.RED:
            return WINNING_VALUE
        if winner is Side.BLUE:
            return -WINNING_VALUE
        return board.num_of_side(Side.RED) - board.num_of_side(Side.BLUE)
