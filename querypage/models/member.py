from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from querypage.models.base import BaseModel

if TYPE_CHECKING:
    from querypage.models.team import Team


class Member(BaseModel, table=True):
    """
    SQLModel representing a member entity in the database.

    This is a clean data model without Active Record methods.
    Use MemberRepository for all database operations.

    Attributes:
        id: Primary key identifier for the member
        username: Login name of the member
        age: Age in years
        team_id: Foreign key of the team, None when unassigned
        team: The team the member belongs to
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    age: int = 0
    team_id: int | None = Field(default=None, foreign_key="team.id")

    team: Optional["Team"] = Relationship(back_populates="members")
