"""add email_verification_token_expires to users

Revision ID: 20250905000000
Revises: 20250823190000
Create Date: 2025-09-05 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

from shopdb.schema_ops import ColumnChange, add_column, drop_column

revision = '20250905000000'
down_revision = '20250823190000'
branch_labels = None
depends_on = None

TOKEN_EXPIRES = ColumnChange(
    table='users',
    column='email_verification_token_expires',
    type_=sa.DateTime(timezone=True),
    nullable=True,
    after='email_verification_token',
)


def upgrade():
    add_column(op, TOKEN_EXPIRES)


def downgrade():
    drop_column(op, TOKEN_EXPIRES)
