"""
Console module for TicTacToe.
Handles terminal input/output and drawing the board as text.
"""

from .config import ConsoleConfig
from .terminal import Terminal
from .renderer import BoardRenderer
