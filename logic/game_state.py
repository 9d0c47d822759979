"""
Game state for TicTacToe.
Holds the marks, squares, the 3x3 board and the players.
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
from dataclasses import dataclass

from .errors import InvalidMoveError
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Mark(Enum):
    """What can occupy a square."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the other playing mark."""
        if self == Mark.X:
            return Mark.O
        if self == Mark.O:
            return Mark.X
        raise ValueError("EMPTY has no opposite mark")

    def __str__(self) -> str:
        return self.value


# Positions 1-9 in row-major reading order
POSITIONS = tuple(range(1, 10))


class Square:
    """
    A single cell of the board.

    The board decides where marks may go; a square just remembers its mark.
    """

    def __init__(self, mark: Mark = Mark.EMPTY):
        self.mark = mark

    def set_mark(self, mark: Mark):
        self.mark = mark

    def is_unmarked(self) -> bool:
        return self.mark == Mark.EMPTY

    def __str__(self) -> str:
        return str(self.mark)

    def __repr__(self) -> str:
        return f"Square({self.mark.name})"


class Board:
    """
    The 3x3 TicTacToe board.

    Squares are addressed by position 1-9:

         1 | 2 | 3
        ---+---+---
         4 | 5 | 6
        ---+---+---
         7 | 8 | 9

    Winner and fullness are always computed from the squares, never stored.
    """

    def __init__(self):
        self._squares: Dict[int, Square] = {}
        self.win_checker = WinChecker()
        self.clear()

    @property
    def cells(self) -> Mapping[int, Square]:
        """Read-only view of position -> Square, for rendering."""
        return MappingProxyType(self._squares)

    def clear(self):
        """Reset every square to EMPTY."""
        self._squares = {position: Square() for position in POSITIONS}

    def marks(self) -> Dict[int, Mark]:
        """Get the mark at every position."""
        return {position: square.mark for position, square in self._squares.items()}

    def unmarked_positions(self) -> List[int]:
        """
        Get all positions that can still be played.

        Returns:
            Unmarked positions in ascending order.
        """
        return [
            position for position, square in self._squares.items()
            if square.is_unmarked()
        ]

    def is_full(self) -> bool:
        return len(self.unmarked_positions()) == 0

    def place_mark(self, position: int, mark: Mark):
        """
        Put a mark on the board.

        Args:
            position: Position 1-9.
            mark: X or O.

        Raises:
            InvalidMoveError: If the position is off the board, already
                marked, or the mark is EMPTY.
        """
        if position not in self._squares:
            raise InvalidMoveError(position, "position must be between 1 and 9")
        if mark == Mark.EMPTY:
            raise InvalidMoveError(position, "cannot place an EMPTY mark")

        square = self._squares[position]
        if not square.is_unmarked():
            raise InvalidMoveError(position, f"square is already marked {square.mark.value}")

        square.set_mark(mark)
        logger.debug("Placed %s at %d", mark.value, position)

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """
        Get the first line held entirely by one player.

        Returns:
            The winning positions, or None if nobody has won.
        """
        return self.win_checker.find_winning_line(self._squares)

    def winning_mark(self) -> Optional[Mark]:
        line = self.winning_line()
        if line is None:
            return None
        return self._squares[line[0]].mark

    def has_winner(self) -> bool:
        return self.winning_mark() is not None


@dataclass(frozen=True)
class Player:
    """One side of the game, identified by its mark."""
    mark: Mark

    def __post_init__(self):
        if self.mark == Mark.EMPTY:
            raise ValueError("A player must play X or O")


@dataclass
class Move:
    """
    A move in the game.
    """
    mark: Mark              # Who made the move
    position: int           # Position (1-9)
    move_number: int        # Which move of the round this is (0-8)
