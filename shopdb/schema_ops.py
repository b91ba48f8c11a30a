"""Guarded column changes for migration scripts.

Every migration in ``migrations/versions`` is a forward/backward pair built
from one :class:`ColumnChange`. The helpers check the live schema before
touching it so that a conflicting migration fails loudly instead of
half-applying; they never retry and never swallow errors.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

import sqlalchemy as sa
from alembic.operations import Operations

logger = logging.getLogger(__name__)


class SchemaConflictError(Exception):
    """The live schema does not match what a migration step expects."""

    def __init__(self, message: str, table: str, column: Optional[str] = None):
        super().__init__(message)
        self.table = table
        self.column = column


@dataclass(frozen=True)
class ColumnChange:
    table: str
    column: str
    type_: Any
    nullable: bool = True
    server_default: Optional[str] = None
    # Placement hint only; honoured where the table is rebuilt (SQLite batch mode).
    after: Optional[str] = None

    def build_column(self) -> sa.Column:
        return sa.Column(
            self.column,
            self.type_,
            nullable=self.nullable,
            server_default=self.server_default,
        )


def _column_names(operations: Operations, table: str) -> Optional[set]:
    if operations.get_context().as_sql:
        # offline (--sql) mode renders a script; there is no live schema to check
        return None
    inspector = sa.inspect(operations.get_bind())
    if not inspector.has_table(table):
        raise SchemaConflictError(f"table {table!r} does not exist", table)
    return {col["name"] for col in inspector.get_columns(table)}


def add_column(operations: Operations, change: ColumnChange) -> None:
    existing = _column_names(operations, change.table)
    if existing is not None and change.column in existing:
        raise SchemaConflictError(
            f"column {change.table}.{change.column} already exists", change.table, change.column
        )

    if change.after and operations.get_context().dialect.name == "sqlite":
        # placement needs a table rebuild; plain ALTER always appends
        with operations.batch_alter_table(change.table, recreate="always") as batch_op:
            batch_op.add_column(change.build_column(), insert_after=change.after)
    else:
        with operations.batch_alter_table(change.table) as batch_op:
            batch_op.add_column(change.build_column())
    logger.info("added column %s.%s", change.table, change.column)


def drop_column(operations: Operations, change: ColumnChange) -> None:
    existing = _column_names(operations, change.table)
    if existing is not None and change.column not in existing:
        raise SchemaConflictError(
            f"column {change.table}.{change.column} does not exist", change.table, change.column
        )

    with operations.batch_alter_table(change.table) as batch_op:
        batch_op.drop_column(change.column)
    logger.info("dropped column %s.%s", change.table, change.column)
