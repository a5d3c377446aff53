from __future__ import annotations

from functools import lru_cache

from sqlalchemy import create_engine, event
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


@lru_cache(maxsize=4)
def get_engine(dsn: str):
    engine = create_engine(dsn, future=True, pool_pre_ping=True)
    if engine.dialect.name == "sqlite":
        enable_sqlite_foreign_keys(engine)
    return engine


def enable_sqlite_foreign_keys(engine) -> None:
    # SQLite ignores FOREIGN KEY clauses, ON DELETE CASCADE included, unless enabled per connection.
    @event.listens_for(engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def create_schema(engine) -> None:
    # Registers every table on Base.metadata before create_all.
    from bookclub.infrastructure.db.models import bot, catalog, clubs  # noqa: F401

    Base.metadata.create_all(engine)


def create_bot_schema(engine) -> None:
    from bookclub.infrastructure.db.models.bot import BotDialogueModel

    Base.metadata.create_all(engine, tables=[BotDialogueModel.__table__])
