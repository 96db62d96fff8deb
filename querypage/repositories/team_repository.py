from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.models.team import Team
from querypage.repositories.base import BaseRepository


class TeamRepository(BaseRepository[Team]):
    """Repository for Team entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Team)

    async def get_by_name(self, name: str) -> Team | None:
        """
        Get team by exact name match.

        Args:
            name: Exact team name to search for.

        Returns:
            Team if found, None otherwise.
        """
        stmt = select(Team).where(Team.name == name)
        result = await self.session.exec(stmt)
        return result.first()
