"""Game domain services: the tic-tac-toe rules.

This package contains pure domain logic that is imported by HTTP routes
and models, keeping transport and storage concerns separated from core
game mechanics.
"""

from .errors import GameError, TicTacToeError
from .evaluator import WINNING_LINES, empty_tiles, evaluate, winning_line
from .rules import play, setup_game
from .state import (
    BOARD_SIZE,
    Active,
    GameState,
    GameStatus,
    Sign,
    Tied,
    Tile,
    Won,
    empty_board,
)
