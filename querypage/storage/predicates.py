"""
Predicate composition for optional search criteria.

``compose`` folds a fixed, ordered table of criteria into one SQLAlchemy
boolean expression. Criteria whose value is absent contribute nothing: no
``true()``/``1=1`` placeholder ever reaches the WHERE clause, and when no
criterion is present the result is ``None`` ("select all rows").

Example:
    ```python
    from querypage.schemas.filters import MemberSearchCondition
    from querypage.storage.predicates import compose

    condition = MemberSearchCondition(team_name_eq="teamB", age_goe=35)
    where = compose(condition)
    # team.name = :name_1 AND member.age >= :age_1
    ```
"""

from functools import reduce
from typing import Any, Callable

from sqlalchemy import ColumnElement, and_

from querypage.models.member import Member
from querypage.models.team import Team
from querypage.schemas.filters import MemberSearchCondition

Predicate = ColumnElement[bool]


def has_text(value: str | None) -> bool:
    """Return True if value contains at least one non-whitespace character."""
    return value is not None and bool(value.strip())


def is_present(value: Any) -> bool:
    return value is not None


# (field on the condition, presence test, predicate constructor)
# Order is part of the contract: generated SQL must be identical for equal
# conditions so it can be cached and diffed.
MEMBER_CRITERIA: tuple[
    tuple[str, Callable[[Any], bool], Callable[[Any], Predicate]], ...
] = (
    ("username_eq", has_text, lambda value: Member.username == value),
    ("team_name_eq", has_text, lambda value: Team.name == value),
    ("age_goe", is_present, lambda value: Member.age >= value),
    ("age_loe", is_present, lambda value: Member.age <= value),
)


def atomic_predicates(condition: MemberSearchCondition) -> list[Predicate]:
    """
    Build the predicates of the present criteria, in declared order.

    Args:
        condition: Search condition with optional fields.

    Returns:
        One predicate per present criterion. Empty if none is present.
    """
    return [
        build(getattr(condition, name))
        for name, present, build in MEMBER_CRITERIA
        if present(getattr(condition, name))
    ]


def compose(condition: MemberSearchCondition) -> Predicate | None:
    """
    Combine the present criteria of a condition with AND.

    Text criteria that are None, empty or whitespace-only are treated as
    absent; numeric criteria are absent only when None (0 is a bound).
    The fold is left to right in declared order. A single present
    criterion is returned as is.

    Args:
        condition: Search condition with optional fields.

    Returns:
        Combined predicate, or None when no criterion is present. Callers
        must treat None as "no WHERE clause".
    """
    predicates = atomic_predicates(condition)
    if not predicates:
        return None
    return reduce(and_, predicates)
