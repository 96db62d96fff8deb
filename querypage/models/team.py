from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from querypage.models.base import BaseModel

if TYPE_CHECKING:
    from querypage.models.member import Member


class Team(BaseModel, table=True):
    """
    SQLModel representing a team that members belong to.

    Attributes:
        id: Primary key identifier for the team
        name: Name of the team
        members: Members assigned to the team
    """

    __table_args__ = {"extend_existing": True}

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)

    members: list["Member"] = Relationship(back_populates="team")
