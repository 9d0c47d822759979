"""
Logic module for TicTacToe.
Handles the board, rules, input validation and the computer opponent.
"""

from .errors import InvalidMoveError
from .game_state import Board, Mark, Move, Player, Square
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult, AnswerResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, random_strategy
