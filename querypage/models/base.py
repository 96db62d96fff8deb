"""
Base model for all database tables with async relationship support.

Combines SQLModel with SQLAlchemy's AsyncAttrs mixin so lazy-loaded
relationships can be reached through ``awaitable_attrs`` in async code
instead of raising MissingGreenlet.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Example:
        ```python
        async with async_session() as session:
            member = await session.get(Member, 1)
            team = await member.awaitable_attrs.team
        ```

    Note:
        Search queries join the team explicitly, so relationship loading
        is only needed for single-entity lookups.
    """

    pass
