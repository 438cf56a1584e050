from enum import IntEnum


class TicTacToeError(IntEnum):
    """Rejection kinds. Numbers are stable; clients branch on them."""
    TileOutOfBounds = 6000
    TileAlreadySet = 6001
    GameAlreadyOver = 6002
    NotPlayersTurn = 6003
    GameAlreadyStarted = 6004
    PlayersNotDistinct = 6005


_MESSAGES = {
    TicTacToeError.TileOutOfBounds: 'Tile is outside the 3x3 board',
    TicTacToeError.TileAlreadySet: 'Tile is already set',
    TicTacToeError.GameAlreadyOver: 'Game is already over',
    TicTacToeError.NotPlayersTurn: 'It is not your turn',
    TicTacToeError.GameAlreadyStarted: 'A game with this code already exists',
    TicTacToeError.PlayersNotDistinct: 'Player one and player two must differ',
}


class GameError(Exception):
    def __init__(self, kind: TicTacToeError, message: str = None):
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.kind.name

    @property
    def number(self) -> int:
        return int(self.kind)

    def to_dict(self):
        return {
            'code': self.code,
            'number': self.number,
            'message': self.message,
        }
