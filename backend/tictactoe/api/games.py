from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from tictactoe import db, socketio
from tictactoe.models import (
    GAME_CODE_PATTERN,
    IDENTITY_MAX_LENGTH,
    Game,
    generate_game_code,
)
from tictactoe.services.games import GameError, TicTacToeError, Tile, play, setup_game


games = Blueprint('games', __name__)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _broadcast(game: Game) -> None:
    socketio.emit('state_update', game.to_dict(), to=f"game:{game.game_code}", namespace='/ws')


@games.errorhandler(GameError)
def handle_game_error(err: GameError):
    db.session.rollback()
    current_app.logger.info(
        f"[reject] path={request.path} user={getattr(current_user, 'username', None)} code={err.code} number={err.number}"
    )
    return jsonify({'error': err.to_dict()}), 400


@games.errorhandler(StaleDataError)
def handle_stale_game(err):
    db.session.rollback()
    current_app.logger.warning(f"[conflict] path={request.path} {err}")
    return jsonify({'error': 'Game was updated by another request, retry'}), 409


@games.route('/setup', methods=['POST'])
@login_required
def setup():
    """
    Creates a new game with the caller as player one.

    Responds with the game record: players, turn, board and status, plus
    the game_code that addresses it and its write version.
    """
    data = request.get_json(silent=True) or {}
    player_two = data.get('player_two')
    if not player_two or not isinstance(player_two, str):
        return jsonify({'error': 'player_two is required'}), 400
    if len(player_two) > IDENTITY_MAX_LENGTH:
        return jsonify({'error': f'player_two must be at most {IDENTITY_MAX_LENGTH} characters'}), 400

    requested_code = data.get('game_code')
    if requested_code is not None:
        game_code = str(requested_code).upper()
        if not GAME_CODE_PATTERN.fullmatch(game_code):
            return jsonify({'error': 'game_code must be 1-16 letters or digits'}), 400
        if Game.query.filter_by(game_code=game_code).first():
            raise GameError(TicTacToeError.GameAlreadyStarted)
    else:
        game_code = generate_game_code(current_app.config.get('GAME_CODE_LENGTH', 4))

    state = setup_game(current_user.username, player_two)
    game = Game.from_state(game_code, state)
    db.session.add(game)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race for the same code
        db.session.rollback()
        raise GameError(TicTacToeError.GameAlreadyStarted)

    current_app.logger.info(f"[setup] game={game.game_code} players={','.join(state.players)}")
    _broadcast(game)
    return jsonify(game.to_dict()), 201


@games.route('/<string:game_code>/play', methods=['POST'])
@login_required
def play_tile(game_code):
    """
    Places the caller's sign on a tile.

    Responds with the updated record, including game_code and the bumped
    version alongside players, turn, board and status.
    """
    data = request.get_json(silent=True) or {}
    row = data.get('row')
    column = data.get('column')
    if not (_is_int(row) and _is_int(column)):
        return jsonify({'error': 'Integer row and column are required'}), 400

    game = Game.query.filter_by(game_code=game_code.upper()).with_for_update().first_or_404()
    next_state = play(game.to_state(), current_user.username, Tile(row=row, column=column))
    game.apply_state(next_state)
    db.session.commit()

    current_app.logger.info(
        f"[play] game={game.game_code} player={current_user.username} tile=({row},{column}) turn={game.turn} status={game.status}"
    )
    _broadcast(game)
    return jsonify(game.to_dict())


@games.route('/<string:game_code>/state', methods=['GET'])
def get_game_state(game_code):
    """Full record, including game_code and version."""
    game = Game.query.filter_by(game_code=game_code.upper()).first_or_404()
    return jsonify(game.to_dict())


@games.route('/active', methods=['GET'])
@login_required
def get_active_games():
    """
    Returns the games the caller is playing that have not finished.
    """
    username = current_user.username
    active = Game.query.filter(
        Game.status == 'active',
        or_(Game.player_one == username, Game.player_two == username),
    ).order_by(Game.id).all()
    return jsonify([g.to_dict() for g in active])
