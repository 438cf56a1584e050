import os
import sys
import pytest

# Ensure the backend root (containing the `tictactoe` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from tictactoe import create_app, db, socketio


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_ENABLED = False
    BCRYPT_LOG_ROUNDS = 4
    GAME_CODE_LENGTH = 4
    CORS_ORIGINS = ['http://localhost:3000']


def _register(test_client, username):
    res = test_client.post('/register', json={'username': username, 'password': 'password'})
    assert res.status_code == 201
    return test_client


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    # Requests must each get their own app context, otherwise Flask-Login's
    # cached user in `g` is shared between test clients
    with application.app_context():
        # Ensure models are imported so tables are created
        import tictactoe.models  # noqa: F401
        db.create_all()
    yield application
    with application.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def app_ctx(flask_app):
    """App context for tests that use db.session directly."""
    with flask_app.app_context():
        yield flask_app
        db.session.remove()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def alice(flask_app):
    """Logged-in client for player one."""
    return _register(flask_app.test_client(), 'alice')


@pytest.fixture()
def bob(flask_app):
    """Logged-in client for player two."""
    return _register(flask_app.test_client(), 'bob')


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    if test_client.is_connected('/ws'):
        test_client.disconnect(namespace='/ws')
