"""
Console configuration for TicTacToe.
Display characters, prompts and timing for the text interface.
"""


class ConsoleConfig:
    """
    Configuration class for the console.
    Change these values to tune how the game looks and paces itself.
    """

    # ==================== INPUT ====================
    # Typing this instead of a square shows the numbered board
    BOARD_HINT_KEY = "d"

    # ==================== BOARD DRAWING ====================
    # Drawn on the winning squares while the result flashes
    EMPHASIS_MARKER = "*"

    # ANSI: erase screen, cursor to top-left
    CLEAR_SEQUENCE = "\033[2J\033[H"

    # ==================== TIMING (seconds) ====================
    # "Computer is calculating" animation
    THINKING_DOTS = 3
    THINKING_DELAY = 0.32

    # Winning board flashes normal / emphasized this many times
    FLASH_CYCLES = 3
    FLASH_DELAY = 0.35

    # ==================== MESSAGES ====================
    WELCOME_MESSAGE = "Welcome to Tic Tac Toe!"
    GOODBYE_MESSAGE = "Thank you for playing Tic Tac Toe! Goodbye"
    PLAY_AGAIN_MESSAGE = "Let's play again!"
    PLAY_AGAIN_PROMPT = "Would you like to play again? (y/n)"
    THINKING_MESSAGE = "Computer is calculating its move"
    NUMBERS_TITLE = "Board with each square containing its corresponding number"
