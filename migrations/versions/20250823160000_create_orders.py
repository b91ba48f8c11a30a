"""create orders table

Revision ID: 20250823160000
Revises: 20250823080000
Create Date: 2025-08-23 16:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

from shopdb.columns import UnsignedBigInt

revision = '20250823160000'
down_revision = '20250823080000'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'orders',
        sa.Column('id', UnsignedBigInt, primary_key=True, autoincrement=True),
        sa.Column('user_id', UnsignedBigInt, sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('total_amount', sa.Numeric(10, 2), nullable=False, server_default='0'),
        sa.Column('payment_status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('order_status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('total_amount >= 0', name='ck_orders_total_nonneg'),
    )
    op.create_index('ix_orders_user_created', 'orders', ['user_id', 'created_at'])


def downgrade():
    op.drop_index('ix_orders_user_created', table_name='orders')
    op.drop_table('orders')
