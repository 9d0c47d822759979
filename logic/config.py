"""
Game configuration for TicTacToe.
Who plays which mark and who moves first.
"""

from .game_state import Mark


class GameConfig:
    """
    Configuration for the game rules.
    """

    # ==================== MARKS ====================
    HUMAN_MARK = Mark.X
    COMPUTER_MARK = Mark.O

    # The first mover starts every round, whichever player holds the mark
    FIRST_TO_MOVE = HUMAN_MARK

    # ==================== BOARD ====================
    BOARD_SIZE = 3
