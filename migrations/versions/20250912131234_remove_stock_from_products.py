"""remove stock from products

Stock is tracked per variant in the inventory tables now.

Downgrade restores the column but not the data: every existing row reads
back the server default 0.

Revision ID: 20250912131234
Revises: 20250905000000
Create Date: 2025-09-12 13:12:34.000000
"""
from alembic import op
import sqlalchemy as sa

from shopdb.schema_ops import ColumnChange, add_column, drop_column

revision = '20250912131234'
down_revision = '20250905000000'
branch_labels = None
depends_on = None

STOCK = ColumnChange(
    table='products',
    column='stock',
    type_=sa.Integer(),
    nullable=False,
    server_default='0',
)


def upgrade():
    drop_column(op, STOCK)


def downgrade():
    add_column(op, STOCK)
