import contextlib
import sys
from collections.abc import AsyncIterator

from alembic import command, config
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from src.config.settings import settings


def create_engine(url: str) -> AsyncEngine:
    url = str(url)
    if url.startswith("sqlite"):
        # aiosqlite connections must not outlive the event loop that opened them
        return create_async_engine(
            url, echo=settings.LOG_DB, connect_args={"timeout": 15}, poolclass=NullPool
        )
    return create_async_engine(url, echo=settings.LOG_DB, pool_pre_ping=True)


def generate_test_db_dsn(dsn: str) -> str:
    """Point a DSN at the `test_`-prefixed database next to it."""
    part_dsn, db_name = str(dsn).rsplit("/", 1)
    return f"{part_dsn}/test_{db_name}"


if "pytest" in sys.modules:
    engine = create_engine(generate_test_db_dsn(settings.database_url))
else:
    engine = create_engine(settings.database_url)

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


def run_upgrade(connection, cfg: config.Config) -> None:
    cfg.attributes["connection"] = connection
    command.upgrade(cfg, "head")


async def init_test_db() -> None:
    """Migrate the test database to head on the pinned engine."""
    async with engine.begin() as conn:
        await conn.run_sync(run_upgrade, config.Config("alembic.ini"))


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit: bool = True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    """
    Yield a session for one unit of work.
    Commits on a clean exit when auto_commit is set and rolls back on any error.
    A caller-owned session_overwrite is yielded as is and left to its owner.
    """
    if session_overwrite is not None:
        yield session_overwrite
        return

    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        if auto_commit:
            await session.commit()
