import pytest
import sqlalchemy as sa
from sqlalchemy.orm.exc import StaleDataError

from tictactoe import db
from tictactoe.models import Game, generate_game_code, status_to_dict
from tictactoe.services.games import Sign, Tile, Tied, Won, play, setup_game


def _save(state, code='TEST'):
    game = Game.from_state(code, state)
    db.session.add(game)
    db.session.commit()
    return game


def test_state_round_trips_through_row(app_ctx):
    state = play(setup_game('alice', 'bob'), 'alice', Tile(2, 1))
    game = _save(state)
    assert game.version == 1
    assert game.to_state() == state
    assert game.to_dict()['board'][2][1] == 'X'


def test_won_status_is_stored_with_winner(app_ctx):
    state = setup_game('alice', 'bob')
    for row, col in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        state = play(state, state.current_player(), Tile(row, col))
    game = _save(state)
    assert game.status == 'won'
    assert game.winner == 'alice'
    assert game.to_state().status == Won(winner='alice')
    assert game.to_state().board[0][2] is Sign.X


def test_status_serialization():
    assert status_to_dict(Tied()) == {'tied': {}}
    assert status_to_dict(Won(winner='bob')) == {'won': {'winner': 'bob'}}
    with pytest.raises(TypeError):
        status_to_dict('active')


def test_generated_codes_are_unique(app_ctx):
    _save(setup_game('alice', 'bob'), code='AAAA')
    code = generate_game_code(4)
    assert len(code) == 4
    assert code != 'AAAA'


def test_stale_write_is_detected(app_ctx):
    game = _save(setup_game('alice', 'bob'))
    # Another writer bumps the row behind this session's back
    db.session.execute(sa.text("UPDATE game SET version = version + 1 WHERE id = :id"), {'id': game.id})
    game.apply_state(play(game.to_state(), 'alice', Tile(0, 0)))
    with pytest.raises(StaleDataError):
        db.session.commit()
    db.session.rollback()
