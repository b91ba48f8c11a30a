# tests/conftest.py
import os

# shopdb.database builds its engine at import time; keep it off any real server.
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from shopdb import migrate  # noqa: E402
from shopdb.database import enable_sqlite_foreign_keys  # noqa: E402
from shopdb.models import Order, User  # noqa: E402


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'shop.db'}"


@pytest.fixture
def alembic_cfg(db_url):
    return migrate.make_config(db_url, configure_logging=False)


@pytest.fixture
def engine(db_url):
    eng = create_engine(db_url, poolclass=NullPool)
    enable_sqlite_foreign_keys(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def migrated(alembic_cfg, engine):
    migrate.upgrade("head", cfg=alembic_cfg)
    return engine


@pytest.fixture
def order_id(migrated) -> int:
    with Session(migrated) as session:
        user = User(
            first_name="Ada",
            last_name="Obi",
            email="ada@example.com",
            password_hash="x",
        )
        order = Order(user=user, total_amount=25)
        session.add(order)
        session.commit()
        return order.id
