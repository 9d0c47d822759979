"""
Win checker for TicTacToe.
Finds the line of three that decides the game.
"""

from typing import Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .game_state import Square


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 squares with the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (1, 2, 3),
        (4, 5, 6),
        (7, 8, 9),
        # Columns
        (1, 4, 7),
        (2, 5, 8),
        (3, 6, 9),
        # Diagonals
        (1, 5, 9),
        (3, 5, 7),
    )

    def find_winning_line(
        self,
        squares: Mapping[int, "Square"]
    ) -> Optional[Tuple[int, int, int]]:
        """
        Find the first winning line on the board.

        Args:
            squares: Position -> Square for all nine positions.

        Returns:
            The winning line as a tuple of positions, or None.
        """
        for line in self.WINNING_LINES:
            if self.three_in_a_row([squares[position] for position in line]):
                return line
        return None

    @staticmethod
    def three_in_a_row(line: Sequence["Square"]) -> bool:
        """
        Check if a single line is held by one player.

        Args:
            line: The three squares of the line.

        Returns:
            True if no square is empty and all three marks match.
        """
        if any(square.is_unmarked() for square in line):
            return False  # Empty cell, no winner on this line

        first = line[0].mark
        return all(square.mark == first for square in line)
