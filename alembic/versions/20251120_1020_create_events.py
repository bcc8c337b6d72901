"""create events and event_translations

Revision ID: 20251120_1020_create_events
Revises: 20251120_1010_create_destinations
Create Date: 2025-11-20 10:20:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251120_1020_create_events'
down_revision = '20251120_1010_create_destinations'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'events',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('start_time', sa.String(32), nullable=False),
        sa.Column('end_time', sa.String(32), nullable=False),
        sa.Column('date', sa.Date(), nullable=True, index=True),
        sa.Column('daily', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('isPopular', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('event_image', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'event_translations',
        sa.Column('event_id', sa.String(36), sa.ForeignKey('events.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('language', sa.String(32), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('event_translations')
    op.drop_table('events')
