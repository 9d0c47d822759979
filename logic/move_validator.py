"""
Move validator for TicTacToe.
Turns what the human typed into a move, or says why it isn't one.
"""

import logging
from typing import Optional
from dataclasses import dataclass

from .game_state import Board

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    position: Optional[int] = None      # The chosen square, when valid
    show_numbers: bool = False          # Player asked for the numbered board


@dataclass
class AnswerResult:
    """Result of a yes/no answer."""
    is_valid: bool
    answer: Optional[bool] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates console input for TicTacToe.

    Rules:
    1. A move is one of the characters 1-9
    2. The square must still be unmarked
    3. The hint key asks for the numbered board instead of moving
    """

    INVALID_CHOICE_MESSAGE = "Sorry that's not a valid choice"
    INVALID_ANSWER_MESSAGE = "Please type 'y' or 'n'"

    def __init__(self, hint_key: str = "d"):
        """
        Initialize the validator.

        Args:
            hint_key: Input that requests the numbered board.
        """
        self.hint_key = hint_key.lower()

    def validate_move(self, board: Board, text: str) -> ValidationResult:
        """
        Validate a typed move.

        Args:
            board: Current board.
            text: Raw line typed by the player.

        Returns:
            ValidationResult with the position, the hint request,
            or an error_message.
        """
        choice = text.strip()

        if choice.lower() == self.hint_key:
            return ValidationResult(is_valid=False, show_numbers=True)

        # Only the literal characters 1-9 name a square
        if len(choice) != 1 or choice not in "123456789":
            logger.debug("Rejected move input %r: not a square", text)
            return ValidationResult(
                is_valid=False,
                error_message=self.INVALID_CHOICE_MESSAGE
            )

        position = int(choice)
        if position not in board.unmarked_positions():
            logger.debug("Rejected move input %r: square taken", text)
            return ValidationResult(
                is_valid=False,
                error_message=self.INVALID_CHOICE_MESSAGE
            )

        return ValidationResult(is_valid=True, position=position)

    def validate_play_again(self, text: str) -> AnswerResult:
        """
        Validate a play-again answer.

        Args:
            text: Raw line typed by the player.

        Returns:
            AnswerResult with answer True for 'y', False for 'n'.
        """
        answer = text.strip().lower()

        if answer == "y":
            return AnswerResult(is_valid=True, answer=True)
        if answer == "n":
            return AnswerResult(is_valid=True, answer=False)

        return AnswerResult(is_valid=False, error_message=self.INVALID_ANSWER_MESSAGE)
