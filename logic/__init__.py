"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .errors import GameError, InvalidIndexError, InvariantViolation
from .game_state import GameState, GameStatus, Mark
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .game_controller import GameController
