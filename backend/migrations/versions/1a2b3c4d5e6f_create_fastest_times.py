"""create fastest_times leaderboard table

Revision ID: 1a2b3c4d5e6f
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e6f'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases bootstrapped by `flask init-db` already have the table
    if 'fastest_times' in set(insp.get_table_names()):
        return

    op.create_table(
        'fastest_times',
        sa.Column('game_number', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('time_ms', sa.Integer(), nullable=False),
        sa.Column('num_guesses', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.current_timestamp(), nullable=True),
        sa.PrimaryKeyConstraint('game_number'),
    )


def downgrade():
    op.drop_table('fastest_times')
