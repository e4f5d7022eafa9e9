"""goals, streaks and daily completions

Revision ID: 3f1c9a0d2b7e
Revises: 
Create Date: 2026-10-19 10:12:41.208133

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a0d2b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'goals',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('deadline', sa.DateTime(timezone=True), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'streaks',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('current_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('best_streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_completed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_completed_date', sa.Date(), nullable=True),
    )
    op.create_table(
        'daily_completions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint('goal_id', 'date', name='uq_completion_goal_day'),
    )
    op.create_index('ix_daily_completions_goal_id', 'daily_completions', ['goal_id'])


def downgrade() -> None:
    op.drop_index('ix_daily_completions_goal_id', table_name='daily_completions')
    op.drop_table('daily_completions')
    op.drop_table('streaks')
    op.drop_table('goals')
