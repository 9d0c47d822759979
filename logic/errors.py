"""
Errors raised by the TicTacToe game logic.
"""


class InvalidMoveError(ValueError):
    """A mark was placed somewhere the rules do not allow."""

    def __init__(self, position, reason: str):
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid move at {position!r}: {reason}")
