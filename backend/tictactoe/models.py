from tictactoe import db, bcrypt
from tictactoe.services.games import Active, GameState, Sign, Tied, Won
from flask_login import UserMixin
import json
import re
import string
import random

IDENTITY_MAX_LENGTH = 64
GAME_CODE_MAX_LENGTH = 16
GAME_CODE_PATTERN = re.compile(r"[A-Z0-9]{1,%d}" % GAME_CODE_MAX_LENGTH)

class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(IDENTITY_MAX_LENGTH), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }

def generate_game_code(length=4):
    """Generate a unique, short game code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if not Game.query.filter_by(game_code=code).first():
            return code

def _status_columns(status):
    if isinstance(status, Active):
        return 'active', None
    if isinstance(status, Won):
        return 'won', status.winner
    if isinstance(status, Tied):
        return 'tied', None
    raise TypeError(f"Unknown game status: {status!r}")

def _status_from_columns(status, winner):
    if status == 'active':
        return Active()
    if status == 'won':
        return Won(winner=winner)
    if status == 'tied':
        return Tied()
    raise ValueError(f"Unknown stored game status: {status!r}")

def status_to_dict(status):
    if isinstance(status, Active):
        return {'active': {}}
    if isinstance(status, Won):
        return {'won': {'winner': status.winner}}
    if isinstance(status, Tied):
        return {'tied': {}}
    raise TypeError(f"Unknown game status: {status!r}")

class Game(db.Model):
    """Persisted match. The rules live in services.games; this row only stores them."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    game_code = db.Column(db.String(GAME_CODE_MAX_LENGTH), unique=True, nullable=False, index=True)
    player_one = db.Column(db.String(IDENTITY_MAX_LENGTH), nullable=False, index=True)
    player_two = db.Column(db.String(IDENTITY_MAX_LENGTH), nullable=False, index=True)
    turn = db.Column(db.Integer, nullable=False, default=1)
    board = db.Column(db.Text, nullable=False)  # JSON-encoded 3x3 list of null/"X"/"O"
    status = db.Column(db.String(16), nullable=False, default='active')  # active, won, tied
    winner = db.Column(db.String(IDENTITY_MAX_LENGTH), nullable=True)
    # Bumped on every write; a stale writer gets StaleDataError
    version = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {'version_id_col': version}

    @classmethod
    def from_state(cls, game_code, state):
        game = cls(game_code=game_code)
        game.apply_state(state)
        return game

    def apply_state(self, state):
        self.player_one, self.player_two = state.players
        self.turn = state.turn
        self.board = json.dumps([
            [cell.value if cell is not None else None for cell in row]
            for row in state.board
        ])
        self.status, self.winner = _status_columns(state.status)

    def to_state(self):
        board = tuple(
            tuple(Sign(cell) if cell is not None else None for cell in row)
            for row in json.loads(self.board)
        )
        return GameState(
            players=(self.player_one, self.player_two),
            turn=self.turn,
            board=board,
            status=_status_from_columns(self.status, self.winner),
        )

    def to_dict(self):
        """Public record: players, turn, board, status, plus the addressing game_code and write version."""
        state = self.to_state()
        return {
            'game_code': self.game_code,
            'players': list(state.players),
            'turn': state.turn,
            'board': json.loads(self.board),
            'status': status_to_dict(state.status),
            'version': self.version,
        }
