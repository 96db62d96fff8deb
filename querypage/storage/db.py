from collections.abc import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.logging import logger
from querypage.settings import app_settings

engine: AsyncEngine = create_async_engine(
    app_settings.DATABASE_URL,
    echo=app_settings.DB_ECHO,
)
async_session = sessionmaker(
    engine, expire_on_commit=False, class_=AsyncSession
)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables that do not exist yet.

    Args:
        bind: Engine to create the tables on. Defaults to the module engine.
    """
    # Register table models on SQLModel.metadata
    import querypage.models  # noqa: F401

    async with (bind if bind is not None else engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Initialized database and tables")


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Get an asynchronous session from the SQLAlchemy session factory.

    A page request's content and count queries both run in the session
    yielded here, so they see one consistent snapshot.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
