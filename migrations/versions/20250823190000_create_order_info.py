"""create order_info table

One row of free-text notes per order; order_id is unique so an order can
never carry two.

Revision ID: 20250823190000
Revises: 20250823160000
Create Date: 2025-08-23 19:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

from shopdb.columns import UnsignedBigInt

revision = '20250823190000'
down_revision = '20250823160000'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'order_info',
        sa.Column('id', UnsignedBigInt, primary_key=True, autoincrement=True),
        sa.Column('order_id', UnsignedBigInt, nullable=False, unique=True),
        sa.Column('info', sa.Text(), nullable=True, comment='Additional order information or notes'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['order_id'], ['orders.id'],
            name='order_info_ibfk_1',
            ondelete='CASCADE',
            onupdate='CASCADE',
        ),
    )


def downgrade():
    op.drop_table('order_info')
