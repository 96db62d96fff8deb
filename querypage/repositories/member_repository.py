"""
Repository for Member entity with conditional search and paging.

Search methods compose the filter from a MemberSearchCondition and hand
it, together with a SQLModelQueryExecutor bound to this repository's
session, to fetch_page. The member is always left-joined to its team so
the team-name criterion can apply and unassigned members still match.

Example:
    ```python
    from querypage.repositories.member_repository import MemberRepository
    from querypage.storage.db import async_session

    async with async_session() as session:
        repo = MemberRepository(session)
        page = await repo.search_page(
            MemberSearchCondition(team_name_eq="teamB"),
            PageRequest(offset=0, limit=10),
        )
    ```
"""

from typing import Any

from sqlalchemy import Select
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.models.member import Member
from querypage.models.team import Team
from querypage.repositories.base import BaseRepository
from querypage.schemas.filters import MemberSearchCondition
from querypage.schemas.member import MemberTeamDto
from querypage.schemas.page import Page, PageRequest
from querypage.storage.pagination import SQLModelQueryExecutor, fetch_page
from querypage.storage.predicates import compose

MEMBER_SORT_COLUMNS = {
    "id": Member.id,
    "username": Member.username,
    "age": Member.age,
}

MEMBER_TEAM_SORT_COLUMNS = {
    **MEMBER_SORT_COLUMNS,
    "team_name": Team.name,
}


def to_member_team_dto(row: Any) -> MemberTeamDto:
    return MemberTeamDto(**row._mapping)


class MemberRepository(BaseRepository[Member]):
    """
    Repository for Member entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    condition-based search, with and without paging.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Member repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Member)

    @staticmethod
    def member_statement() -> Select[Any]:
        return select(Member).outerjoin(Team, Member.team_id == Team.id)

    @staticmethod
    def member_team_statement() -> Select[Any]:
        return (
            select(
                Member.id.label("member_id"),  # type: ignore[union-attr]
                Member.username,
                Member.age,
                Team.id.label("team_id"),  # type: ignore[union-attr]
                Team.name.label("team_name"),  # type: ignore[attr-defined]
            )
            .select_from(Member)
            .outerjoin(Team, Member.team_id == Team.id)
        )

    async def search(self, condition: MemberSearchCondition) -> list[Member]:
        """
        Get all members matching the condition, ordered by id.

        Args:
            condition: Optional search criteria. No criteria means all
                members.

        Returns:
            List of matching members.
        """
        stmt = self.member_statement()
        where = compose(condition)
        if where is not None:
            stmt = stmt.where(where)
        result = await self.session.exec(stmt.order_by(Member.id))
        return list(result.all())

    async def search_page(
        self, condition: MemberSearchCondition, page: PageRequest
    ) -> Page[Member]:
        """
        Get one page of members matching the condition.

        The total-count query only runs when the page comes back full.

        Args:
            condition: Optional search criteria.
            page: Offset, limit and sort (fields: id, username, age).

        Returns:
            Page of Member entities with exact total.

        Raises:
            InvalidPageRequest: If sorting by an unknown field.
            QueryExecutionError: If the content or count query fails.
        """
        executor = SQLModelQueryExecutor[Member](
            self.session,
            self.member_statement(),
            sort_columns=MEMBER_SORT_COLUMNS,
            tie_breaker=Member.id,
        )
        return await fetch_page(compose(condition), None, page, executor)

    async def search_page_with_team(
        self, condition: MemberSearchCondition, page: PageRequest
    ) -> Page[MemberTeamDto]:
        """
        Get one page of member/team projections matching the condition.

        Args:
            condition: Optional search criteria.
            page: Offset, limit and sort (fields: id, username, age,
                team_name).

        Returns:
            Page of MemberTeamDto rows with exact total.

        Raises:
            InvalidPageRequest: If sorting by an unknown field.
            QueryExecutionError: If the content or count query fails.
        """
        executor = SQLModelQueryExecutor[MemberTeamDto](
            self.session,
            self.member_team_statement(),
            sort_columns=MEMBER_TEAM_SORT_COLUMNS,
            tie_breaker=Member.id,
            row_mapper=to_member_team_dto,
        )
        return await fetch_page(compose(condition), None, page, executor)
