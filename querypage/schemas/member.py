from pydantic import BaseModel


class MemberTeamDto(BaseModel):  # type: ignore[misc]
    """Flat projection of a member together with its (optional) team."""

    model_config = {"frozen": True}

    member_id: int
    username: str
    age: int
    team_id: int | None = None
    team_name: str | None = None
