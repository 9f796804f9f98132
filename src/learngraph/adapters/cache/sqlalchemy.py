"""Key-value cache persisted through SQLAlchemy.

The engine is synchronous. ``get`` and ``set`` are declared ``async`` to satisfy
the ``KeyValueCache`` port and block the event loop while the statement runs.
They stay on the calling thread because SQLite ``:memory:`` databases are bound
to the thread that opened them.
"""

from __future__ import annotations

from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Dialect,
    MetaData,
    String,
    Table,
    TypeDecorator,
    create_engine,
    insert,
    select,
    update,
)

from learngraph.config.storage import get_cache_uri

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = getLogger(__name__)

metadata = MetaData()


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


cache_entry_table = Table(
    "cache_entries",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", JSON(none_as_null=True), nullable=True),
    Column("updated_at", UTCDateTime(), nullable=False),
)


class SqlAlchemyCache:
    """Persisted cache; survives process restarts. Calls block (see module docs)."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        metadata.create_all(engine, checkfirst=True)

    @classmethod
    def from_uri(cls, uri: str | None = None) -> SqlAlchemyCache:
        resolved = uri or get_cache_uri()
        log.debug("Opening key-value cache at %s", resolved)
        return cls(create_engine(resolved, future=True))

    async def get(self, key: str) -> Any | None:
        stmt = select(cache_entry_table.c.value).where(cache_entry_table.c.key == key)
        with self.engine.connect() as connection:
            return connection.execute(stmt).scalar_one_or_none()

    async def set(self, key: str, value: Any | None) -> None:
        now = datetime.now(UTC)
        with self.engine.begin() as connection:
            result = connection.execute(
                update(cache_entry_table)
                .where(cache_entry_table.c.key == key)
                .values(value=value, updated_at=now)
            )
            if result.rowcount == 0:
                connection.execute(
                    insert(cache_entry_table).values(key=key, value=value, updated_at=now)
                )

    def dispose(self) -> None:
        self.engine.dispose()
