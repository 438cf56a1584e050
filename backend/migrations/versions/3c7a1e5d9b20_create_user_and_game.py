"""create user and game tables

Revision ID: 3c7a1e5d9b20
Revises:
Create Date: 2026-10-19 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c7a1e5d9b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    if 'user' not in existing_tables:
        op.create_table(
            'user',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('username', sa.String(length=64), nullable=False),
            sa.Column('password_hash', sa.String(length=256), nullable=False),
        )
        op.create_index('ix_user_username', 'user', ['username'], unique=True)

    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('game_code', sa.String(length=16), nullable=False),
            sa.Column('player_one', sa.String(length=64), nullable=False),
            sa.Column('player_two', sa.String(length=64), nullable=False),
            sa.Column('turn', sa.Integer(), nullable=False, server_default='1'),
            sa.Column('board', sa.Text(), nullable=False),
            sa.Column('status', sa.String(length=16), nullable=False, server_default='active'),
            sa.Column('winner', sa.String(length=64), nullable=True),
            sa.Column('version', sa.Integer(), nullable=False),
        )
        op.create_index('ix_game_game_code', 'game', ['game_code'], unique=True)
        op.create_index('ix_game_player_one', 'game', ['player_one'])
        op.create_index('ix_game_player_two', 'game', ['player_two'])


def downgrade():
    op.drop_index('ix_game_player_two', table_name='game')
    op.drop_index('ix_game_player_one', table_name='game')
    op.drop_index('ix_game_game_code', table_name='game')
    op.drop_table('game')
    op.drop_index('ix_user_username', table_name='user')
    op.drop_table('user')
