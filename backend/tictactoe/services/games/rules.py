"""State transitions for a match.

Both operations are pure: they take the current value plus the caller's
arguments and either return the next value or raise ``GameError``. The
input is never modified, so a rejected move leaves the stored record as it
was.
"""

from dataclasses import replace

from .errors import GameError, TicTacToeError
from .evaluator import evaluate
from .state import GameState, Sign, Tile


def setup_game(player_one: str, player_two: str) -> GameState:
    if player_one == player_two:
        raise GameError(TicTacToeError.PlayersNotDistinct)
    return GameState(players=(player_one, player_two))


def play(game: GameState, player: str, tile: Tile) -> GameState:
    """Apply ``player``'s move at ``tile``; checks run in a fixed order."""
    if not game.is_active():
        raise GameError(TicTacToeError.GameAlreadyOver)

    if not tile.in_bounds():
        raise GameError(TicTacToeError.TileOutOfBounds)

    if player != game.current_player():
        raise GameError(TicTacToeError.NotPlayersTurn)

    if game.cell(tile) is not None:
        raise GameError(TicTacToeError.TileAlreadySet)

    sign = Sign.for_player(game.current_player_index())
    board = tuple(
        tuple(
            sign if (row, col) == (tile.row, tile.column) else cell
            for col, cell in enumerate(cells)
        )
        for row, cells in enumerate(game.board)
    )

    # The counter advances on the deciding move as well
    return replace(
        game,
        board=board,
        turn=game.turn + 1,
        status=evaluate(board, game.players),
    )
