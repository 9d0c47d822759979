"""
Board renderer for TicTacToe.
Draws the board as ASCII art: with marks, with square numbers,
or with the winning line picked out.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from logic.config import GameConfig
from logic.game_state import Square

from .config import ConsoleConfig


class BoardRenderer:
    """
    Turns board squares into printable lines.

    Each row is three lines tall, rows are separated by a dashed line:

             |     |
          X  |  O  |  X
             |     |
        -----|-----|-----
    """

    SPACER = "     |     |   "
    ROW_SEPARATOR = "-----|-----|-----"

    def __init__(self, config: Optional[ConsoleConfig] = None):
        self.config = config or ConsoleConfig()
        self.size = GameConfig.BOARD_SIZE

    def draw(self, cells: Mapping[int, Square]) -> List[str]:
        """
        Draw the board with its current marks.

        Args:
            cells: Position -> Square, as exposed by Board.cells.

        Returns:
            The board as a list of lines.
        """
        return self._draw_symbols({position: str(square) for position, square in cells.items()})

    def draw_numbers(self) -> List[str]:
        """Draw the board with every square showing its position number."""
        return self._draw_symbols({position: str(position) for position in range(1, self.size ** 2 + 1)})

    def draw_emphasized(
        self,
        cells: Mapping[int, Square],
        winning_line: Sequence[int]
    ) -> List[str]:
        """
        Draw the board with the winning squares replaced by the emphasis marker.

        Args:
            cells: Position -> Square.
            winning_line: Positions to emphasize.

        Returns:
            The board as a list of lines.
        """
        symbols = {
            position: self.config.EMPHASIS_MARKER if position in winning_line else str(square)
            for position, square in cells.items()
        }
        return self._draw_symbols(symbols)

    def _draw_symbols(self, symbols: Dict[int, str]) -> List[str]:
        lines = []
        for row in range(self.size):
            if row > 0:
                lines.append(self.ROW_SEPARATOR)

            first = row * self.size + 1
            row_symbols = [symbols[position] for position in range(first, first + self.size)]

            lines.append(self.SPACER)
            lines.append("  " + "  |  ".join(row_symbols) + " ")
            lines.append(self.SPACER)
        return lines
