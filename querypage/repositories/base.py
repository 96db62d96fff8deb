"""
Base repository with primary-key lookups and persistence helpers.

Conditional lookups do not belong here: they go through a search
condition and ``compose`` in the concrete repository, so blank text and
missing criteria are handled in one place. The base class only knows
entities by primary key.

Example:
    ```python
    from querypage.repositories.base import BaseRepository
    from querypage.models.team import Team


    class TeamRepository(BaseRepository[Team]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Team)
    ```
"""

from typing import Generic, Iterable, Type, TypeVar

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Repository base holding a session and the managed model.

    Type Parameters:
        T: The SQLModel table type this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: int) -> T | None:
        return await self.session.get(self.model, id)

    async def get_all(self) -> list[T]:
        """
        Get every entity, ordered by primary key.

        Takes no filters. Conditional lookups go through the concrete
        repository's ``search`` methods.
        """
        stmt = select(self.model).order_by(*inspect(self.model).primary_key)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, entity: T) -> T:
        """
        Persist one entity and load its generated fields.

        Raises:
            SQLAlchemyError: If the insert fails. The session is rolled back.
        """
        return (await self.create_many([entity]))[0]

    async def create_many(self, entities: Iterable[T]) -> list[T]:
        """
        Persist several entities in one flush.

        Used to seed related rows: after this returns, every entity has
        its primary key, so dependants can reference it.

        Args:
            entities: Unsaved entity instances.

        Returns:
            The same instances, refreshed from the database.

        Raises:
            SQLAlchemyError: If the insert fails. The session is rolled back.
        """
        created = list(entities)
        try:
            self.session.add_all(created)
            await self.session.flush()
            for entity in created:
                await self.session.refresh(entity)
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"Error creating {len(created)} {self.model.__name__} rows: {e}"
            )
            raise
        logger.debug(f"Created {len(created)} {self.model.__name__} rows")
        return created

    async def delete(self, entity: T) -> None:
        """
        Delete an entity.

        Raises:
            SQLAlchemyError: If the delete fails. The session is rolled back.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise
