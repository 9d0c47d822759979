"""
Computer opponent for TicTacToe.
Picks one of the open squares with a pluggable strategy, random by default.
"""

import logging
import random
from typing import Callable, List, Optional

from .errors import InvalidMoveError
from .game_state import Board, Mark, Player

logger = logging.getLogger(__name__)

# Takes the unmarked positions and returns the one to play
MoveStrategy = Callable[[List[int]], int]


def random_strategy(positions: List[int]) -> int:
    """Pick any open square with equal chance."""
    return random.choice(positions)


class AIPlayer:
    """
    The computer side of the game.

    No lookahead: the strategy only ever sees the list of open squares.
    Tests swap in a fixed sequence instead of random choice.
    """

    def __init__(self, mark: Mark = Mark.O, strategy: Optional[MoveStrategy] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the computer plays (default: O)
            strategy: Move selection function. Uses random choice if not provided.
        """
        self.player = Player(mark)
        self.strategy = strategy or random_strategy

    @property
    def mark(self) -> Mark:
        return self.player.mark

    def choose_move(self, board: Board) -> Optional[int]:
        """
        Choose where to play next.

        Args:
            board: Current board.

        Returns:
            A position from board.unmarked_positions(), or None if the board is full.

        Raises:
            InvalidMoveError: If the strategy picks a square that isn't open.
        """
        open_positions = board.unmarked_positions()

        if not open_positions:
            return None

        position = self.strategy(list(open_positions))
        if position not in open_positions:
            raise InvalidMoveError(position, "strategy chose a square that is not open")

        logger.debug("Computer (%s) chose %d from %s", self.mark.value, position, open_positions)
        return position
