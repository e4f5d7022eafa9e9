"""add shame metrics

Revision ID: c27d5e9f41b3
Revises: 8b4e2d61c0a5
Create Date: 2026-10-20 09:31:17.402615

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c27d5e9f41b3'
down_revision: Union[str, None] = '8b4e2d61c0a5'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        'shame_metrics',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('goal_id', sa.String(length=36), sa.ForeignKey('goals.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('consecutive_skips', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('total_skips', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('social_media_minutes_today', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('opportunity_cost_hours', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_shame_notification', sa.DateTime(timezone=True), nullable=True),
    )

def downgrade():
    op.drop_table('shame_metrics')
