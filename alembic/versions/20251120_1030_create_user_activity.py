"""create user_requests and saved_places

Revision ID: 20251120_1030_create_user_activity
Revises: 20251120_1020_create_events
Create Date: 2025-11-20 10:30:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251120_1030_create_user_activity'
down_revision = '20251120_1020_create_events'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'user_requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('request', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, index=True),
    )
    op.create_table(
        'saved_places',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False, index=True),
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('saved_places')
    op.drop_table('user_requests')
