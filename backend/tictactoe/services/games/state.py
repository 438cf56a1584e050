"""Value types for a single tic-tac-toe match.

Everything here is immutable; operations in ``rules`` return new values
instead of mutating the ones they were given.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

BOARD_SIZE = 3


class Sign(Enum):
    X = 'X'
    O = 'O'

    @classmethod
    def for_player(cls, index: int) -> 'Sign':
        return cls.X if index == 0 else cls.O

    @property
    def player_index(self) -> int:
        return 0 if self is Sign.X else 1


@dataclass(frozen=True)
class Tile:
    row: int
    column: int

    def in_bounds(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE


@dataclass(frozen=True)
class Active:
    pass


@dataclass(frozen=True)
class Won:
    winner: str


@dataclass(frozen=True)
class Tied:
    pass


GameStatus = Union[Active, Won, Tied]

Board = Tuple[Tuple[Optional[Sign], ...], ...]


def empty_board() -> Board:
    return tuple(tuple(None for _ in range(BOARD_SIZE)) for _ in range(BOARD_SIZE))


@dataclass(frozen=True)
class GameState:
    """
    One match: the two players, the turn counter, the board and the status.

    ``players[0]`` moves on odd turns with X, ``players[1]`` on even turns
    with O. ``turn`` starts at 1 and grows by one per accepted move.
    """
    players: Tuple[str, str]
    turn: int = 1
    board: Board = field(default_factory=empty_board)
    status: GameStatus = field(default_factory=Active)

    def is_active(self) -> bool:
        return isinstance(self.status, Active)

    def current_player_index(self) -> int:
        return (self.turn - 1) % 2

    def current_player(self) -> str:
        return self.players[self.current_player_index()]

    def cell(self, tile: Tile) -> Optional[Sign]:
        return self.board[tile.row][tile.column]
