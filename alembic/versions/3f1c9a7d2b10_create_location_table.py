"""create_location_table

Revision ID: 3f1c9a7d2b10
Revises: 
Create Date: 2026-10-19 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the shop-scoped location table."""
    op.create_table(
        'location',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('shop_domain', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=False),
        sa.Column('apartment', sa.String(), nullable=True),
        sa.Column('city', sa.String(), nullable=True),
        sa.Column('zipcode', sa.String(), nullable=True),
        sa.Column('province', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('show_address', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('show_city', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('show_province', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('show_postal_code', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('show_country', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('offers_pickup', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('offers_delivery', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_location_id', 'location', ['id'])
    op.create_index('ix_location_shop_domain', 'location', ['shop_domain'])
    op.create_index('ix_location_shop_created', 'location', ['shop_domain', 'created_at'])


def downgrade() -> None:
    """Drop location table."""
    op.drop_index('ix_location_shop_created', table_name='location')
    op.drop_index('ix_location_shop_domain', table_name='location')
    op.drop_index('ix_location_id', table_name='location')
    op.drop_table('location')
