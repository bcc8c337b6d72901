"""create destinations, destination_translations, destination_images

Revision ID: 20251120_1010_create_destinations
Revises: 20251120_1000_create_users
Create Date: 2025-11-20 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20251120_1010_create_destinations'
down_revision = '20251120_1000_create_users'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'destinations',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('city', sa.String(255), nullable=False, index=True),
        sa.Column('deity', sa.String(32), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('live_feed', sa.Text(), nullable=False),
        sa.Column('sampradaya', sa.String(32), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        'destination_translations',
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('language', sa.String(32), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('short_description', sa.Text(), nullable=False),
        sa.Column('detailed_description', sa.Text(), nullable=False),
    )
    op.create_table(
        'destination_images',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('destination_id', sa.String(36), sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('hero_image', sa.Text(), nullable=False),
    )

def downgrade() -> None:
    op.drop_table('destination_images')
    op.drop_table('destination_translations')
    op.drop_table('destinations')
