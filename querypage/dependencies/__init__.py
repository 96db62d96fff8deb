"""
Dependency injection configuration for FastAPI.

Repositories receive the request-scoped session from get_session, so a
page's content and count queries share one session. Override
``get_session`` or ``get_member_repository`` through
``app.dependency_overrides`` in tests.

Example:
    ```python
    from querypage.dependencies import MemberRepoDep

    @router.get("/members")
    async def get_members(repo: MemberRepoDep) -> list[Member]:
        return await repo.search(MemberSearchCondition())
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.repositories.member_repository import MemberRepository
from querypage.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_member_repository(session: SessionDep) -> MemberRepository:
    """
    Get member repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        MemberRepository instance with session.
    """
    return MemberRepository(session)


MemberRepoDep = Annotated[MemberRepository, Depends(get_member_repository)]
