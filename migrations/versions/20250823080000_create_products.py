"""create products table

Revision ID: 20250823080000
Revises: 20250823000000
Create Date: 2025-08-23 08:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

from shopdb.columns import UnsignedBigInt

revision = '20250823080000'
down_revision = '20250823000000'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'products',
        sa.Column('id', UnsignedBigInt, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.CheckConstraint('price >= 0', name='ck_products_price_nonneg'),
    )


def downgrade():
    op.drop_table('products')
