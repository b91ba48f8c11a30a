"""Run the schema migrations in ``migrations/versions``.

Alembic does the actual work and keeps the ledger of applied revisions in
its version table. This module only resolves configuration, logs each run
and re-raises failures untouched: a failed migration stops the run and is
left for an operator to inspect.

Usage:
    python -m shopdb.migrate upgrade [REVISION]
    python -m shopdb.migrate downgrade [REVISION]
    python -m shopdb.migrate current
    python -m shopdb.migrate history

The database comes from DATABASE_URL unless --url is given.
"""
import argparse
import logging
from logging.config import fileConfig
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine, pool

from .database import to_sync_url

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]
ALEMBIC_INI = ROOT / "alembic.ini"


def make_config(database_url: Optional[str] = None, configure_logging: bool = True) -> Config:
    cfg = Config(str(ALEMBIC_INI))
    if database_url:
        # attributes, not set_main_option: URLs may contain '%' which the ini parser interpolates
        cfg.attributes["database_url"] = database_url
    cfg.attributes["configure_logging"] = configure_logging
    return cfg


def _resolve_url(cfg: Config) -> str:
    url = cfg.attributes.get("database_url") or os.environ.get("DATABASE_URL")
    if url:
        return to_sync_url(url)
    return cfg.get_main_option("sqlalchemy.url")


def upgrade(
    revision: str = "head",
    database_url: Optional[str] = None,
    cfg: Optional[Config] = None,
    sql: bool = False,
) -> None:
    """Apply migrations up to ``revision``. With ``sql`` the DDL is rendered instead of executed."""
    cfg = cfg or make_config(database_url)
    logger.info("upgrading schema to %s", revision)
    try:
        command.upgrade(cfg, revision, sql=sql)
    except Exception:
        logger.exception("upgrade to %s failed", revision)
        raise
    if not sql:
        logger.info("schema now at %s", current_revision(cfg=cfg))


def downgrade(
    revision: str = "-1",
    database_url: Optional[str] = None,
    cfg: Optional[Config] = None,
    sql: bool = False,
) -> None:
    cfg = cfg or make_config(database_url)
    logger.info("downgrading schema to %s", revision)
    try:
        command.downgrade(cfg, revision, sql=sql)
    except Exception:
        logger.exception("downgrade to %s failed", revision)
        raise
    if not sql:
        logger.info("schema now at %s", current_revision(cfg=cfg))


def current_revision(database_url: Optional[str] = None, cfg: Optional[Config] = None) -> Optional[str]:
    """Revision recorded in the ledger, or None for an unmigrated database."""
    cfg = cfg or make_config(database_url)
    engine = create_engine(_resolve_url(cfg), poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context = MigrationContext.configure(
                connection,
                opts={"version_table": cfg.get_main_option("version_table", "alembic_version")},
            )
            return context.get_current_revision()
    finally:
        engine.dispose()


def history(cfg: Optional[Config] = None) -> List[Tuple[str, Optional[str], str]]:
    """(revision, down_revision, description) for every migration, oldest first."""
    script = ScriptDirectory.from_config(cfg or make_config())
    out = []
    for rev in script.walk_revisions(base="base", head="heads"):
        out.append((rev.revision, rev.down_revision, rev.doc))
    out.reverse()
    return out


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="python -m shopdb.migrate", description="Apply or revert schema migrations.")
    parser.add_argument("--url", help="database URL (defaults to DATABASE_URL)")
    parser.add_argument("--sql", action="store_true", help="print the DDL instead of running it")
    sub = parser.add_subparsers(dest="action", required=True)
    up = sub.add_parser("upgrade", help="apply migrations up to REVISION")
    up.add_argument("revision", nargs="?", default="head")
    down = sub.add_parser("downgrade", help="revert migrations down to REVISION")
    down.add_argument("revision", nargs="?", default="-1")
    sub.add_parser("current", help="show the applied revision")
    sub.add_parser("history", help="list migrations in application order")
    args = parser.parse_args(argv)

    # logging is configured once by the entry point, not again by env.py
    cfg = make_config(args.url, configure_logging=False)
    if args.action == "upgrade":
        upgrade(args.revision, cfg=cfg, sql=args.sql)
    elif args.action == "downgrade":
        downgrade(args.revision, cfg=cfg, sql=args.sql)
    elif args.action == "current":
        print(current_revision(cfg=cfg) or "base")
    else:
        for revision, down_revision, doc in history(cfg):
            print(f"{down_revision or 'base'} -> {revision}  {doc}")
    return 0


if __name__ == "__main__":
    fileConfig(str(ALEMBIC_INI), disable_existing_loggers=False)
    sys.exit(main())
