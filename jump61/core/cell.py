"""Sides and the immutable per-square value held by a Board."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Side(Enum):
    NEUTRAL = "white"
    RED = "red"
    BLUE = "blue"

    def opponent(self) -> "Side":
        """Return the other player. Neutral has no opponent."""
        if self is Side.RED:
            return Side.BLUE
        if self is Side.BLUE:
            return Side.RED
        raise ValueError("neutral side has no opponent")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @classmethod
    def parse(cls, name: str) -> "Side":
        """Parse 'red' / 'blue' (any case) into a Side."""
        try:
            side = cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"unknown side: {name!r}") from None
        if side is cls.NEUTRAL:
            raise ValueError("a player side must be red or blue")
        return side

    def __str__(self):
        return self.value


_SYMBOLS = {Side.NEUTRAL: "-", Side.RED: "r", Side.BLUE: "b"}


@dataclass(frozen=True)
class Cell:
    side: Side
    spots: int

    def __post_init__(self):
        if self.spots < 1:
            raise ValueError(f"a square holds at least one spot, got {self.spots}")
        if self.side is Side.NEUTRAL and self.spots != 1:
            raise ValueError("an unclaimed square holds exactly one spot")

    @staticmethod
    def of(side: Optional[Side], spots: int) -> "Cell":
        """Return the cell for SIDE with SPOTS, reusing the shared neutral cell."""
        if side is None or side is Side.NEUTRAL:
            if spots != 1:
                raise ValueError("an unclaimed square holds exactly one spot")
            return NEUTRAL_CELL
        return Cell(side, spots)

    def __str__(self):
        return f"{self.spots}{self.side.symbol}"


NEUTRAL_CELL = Cell(Side.NEUTRAL, 1)
