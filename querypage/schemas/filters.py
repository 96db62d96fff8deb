"""
Type-safe search conditions for member queries.

Each field is an independently optional criterion. ``None`` means "do not
filter on this attribute"; how a present value turns into a predicate is
decided by querypage.storage.predicates.compose.

Key benefits:
- Runtime validation via Pydantic
- Self-documenting filter options
- Whitelisted filter fields (unknown keys are rejected)
"""

from typing import Any

from pydantic import BaseModel, Field


class BaseFilter(BaseModel):  # type: ignore[misc]
    """
    Base class for all search condition schemas.

    Conditions are immutable value objects created per request.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert filter schema to dictionary, excluding None values.

        Returns:
            Dictionary of non-None filter values.

        Example:
            >>> MemberSearchCondition(username_eq="member1").to_dict()
            {'username_eq': 'member1'}
        """
        return {k: v for k, v in self.model_dump().items() if v is not None}

    model_config = {
        "extra": "forbid",  # Reject unexpected fields
        "frozen": True,
    }


class MemberSearchCondition(BaseFilter):
    """
    Search criteria for members joined with their team.

    All fields are optional and are combined with AND. Text criteria that
    are empty or whitespace-only are treated as absent.

    Example:
        >>> condition = MemberSearchCondition(team_name_eq="teamB", age_goe=35)
        >>> page = await repo.search_page(condition, PageRequest(limit=10))
    """

    username_eq: str | None = Field(
        default=None,
        description="Filter by exact member username",
    )
    team_name_eq: str | None = Field(
        default=None,
        description="Filter by exact team name",
    )
    age_goe: int | None = Field(
        default=None,
        description="Filter members with age greater than or equal to this",
    )
    age_loe: int | None = Field(
        default=None,
        description="Filter members with age less than or equal to this",
    )
