"""Create products table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products table with its lookup indexes."""
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('brand', sa.String(100), nullable=True),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('sku', sa.String(64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # SKUs are unique across the whole catalog
    op.create_unique_constraint(
        'uq_products_sku',
        'products',
        ['sku'],
    )

    op.create_index('idx_category', 'products', ['category'])
    op.create_index('idx_brand', 'products', ['brand'])
    op.create_index('idx_price', 'products', ['price'])


def downgrade() -> None:
    """Drop products table."""
    op.drop_index('idx_price', table_name='products')
    op.drop_index('idx_brand', table_name='products')
    op.drop_index('idx_category', table_name='products')
    op.drop_table('products')
