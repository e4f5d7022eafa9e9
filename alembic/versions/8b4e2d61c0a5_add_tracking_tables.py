"""add screen time, focus session and reward tables

Revision ID: 8b4e2d61c0a5
Revises: 3f1c9a0d2b7e
Create Date: 2026-10-19 16:40:03.551920

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b4e2d61c0a5'
down_revision: Union[str, None] = '3f1c9a0d2b7e'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        'screen_time_entries',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('app_name', sa.String(), nullable=False),
        sa.Column('time_spent_minutes', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_table(
        'focus_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('planned_duration_minutes', sa.Integer(), nullable=False),
        sa.Column('actual_duration_minutes', sa.Integer(), nullable=True),
        sa.Column('distraction_events', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('completion_rate', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_table(
        'rewards',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('reward_type', sa.String(), nullable=False),
        sa.Column('points_earned', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('badge_name', sa.String(), nullable=True),
        sa.Column('unlocked_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('claimed', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

def downgrade():
    op.drop_table('rewards')
    op.drop_table('focus_sessions')
    op.drop_table('screen_time_entries')
