"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """
    Coordinates as seen from the screen: row 0 is the top row (black's back rank), row 7 the bottom row (white's back rank).
    Column 0 is the left-most column.
    """

    row: int
    col: int

    @classmethod
    def from_pair(cls, pair: tuple[int, int] | list[int]) -> Square:
        row, col = pair
        return cls(row, col)

    def to_pair(self) -> list[int]:
        """JSON friendly version"""
        return [self.row, self.col]

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )
