"""
Terminal module for TicTacToe.
Handles reading lines from the player and writing to the screen.
"""

import sys
import time
from typing import Callable, Optional, TextIO

from .config import ConsoleConfig


class Terminal:
    """
    Simple terminal wrapper class.
    Everything the game shows or asks goes through here.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep
    ):
        """
        Initialize the terminal.

        Args:
            config: Console configuration. Uses defaults if not provided.
            stdin: Stream to read from (default: sys.stdin).
            stdout: Stream to write to (default: sys.stdout).
            sleep: Function used for cosmetic pauses.
        """
        self.config = config or ConsoleConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.sleep = sleep

    def read_line(self) -> str:
        """
        Read one line of input.

        Returns:
            The line without its trailing newline.

        Raises:
            EOFError: If input has run out.
        """
        line = self.stdin.readline()
        if line == "":
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def write_line(self, text: str = ""):
        self.stdout.write(text + "\n")
        self.stdout.flush()

    def write(self, text: str):
        """Write without a newline (used for the thinking dots)."""
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self):
        self.write(self.config.CLEAR_SEQUENCE)

    def pause(self, seconds: float):
        self.sleep(seconds)
