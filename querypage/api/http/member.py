"""
Member search endpoints.

Query parameters map one-to-one onto MemberSearchCondition; any that are
omitted (or blank, for text) do not filter. Paging is offset/limit with
repeatable ``sort=field[,asc|desc[,first|last]]`` parameters.

Example:
    GET /members?team_name=teamB&age_goe=35
    GET /members?offset=20&limit=10&sort=age,desc&sort=username
"""

from fastapi import APIRouter, Query

from querypage.dependencies import MemberRepoDep
from querypage.logging import set_log_context
from querypage.models.member import Member
from querypage.schemas.filters import MemberSearchCondition
from querypage.schemas.member import MemberTeamDto
from querypage.schemas.page import PageRequest, SortOrder
from querypage.schemas.response import PageResponseModel
from querypage.settings import app_settings
from querypage.utils.error_handler import handle_http_errors

router = APIRouter(prefix="/members", tags=["members"])


@router.get(
    "",
    response_model=PageResponseModel[MemberTeamDto],
    summary="Search members page by page",
)
@handle_http_errors
async def get_members_page(
    repo: MemberRepoDep,
    username: str | None = None,
    team_name: str | None = None,
    age_goe: int | None = None,
    age_loe: int | None = None,
    offset: int = 0,
    limit: int = app_settings.DEFAULT_PAGE_SIZE,
    sort: list[str] = Query(default=[]),
) -> PageResponseModel[MemberTeamDto]:
    """
    Get one page of members with their team.

    The total is exact. It is only counted separately when the
    requested page comes back full.

    Args:
        repo: Member repository (injected via dependency).
        username: Exact username filter.
        team_name: Exact team name filter.
        age_goe: Minimum age (inclusive).
        age_loe: Maximum age (inclusive).
        offset: Rows to skip.
        limit: Page size.
        sort: Sort expressions, applied in order.

    Returns:
        Page items, offset, limit, total and page metadata.

    Raises:
        HTTPException: 400 for invalid paging or sort parameters,
            503 if the database query fails.
    """
    set_log_context(offset=offset, limit=limit, sort=";".join(sort) or "-")
    condition = MemberSearchCondition(
        username_eq=username,
        team_name_eq=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )
    page_request = PageRequest(
        offset=offset,
        limit=limit,
        sort=tuple(SortOrder.parse(expression) for expression in sort),
    )
    page = await repo.search_page_with_team(condition, page_request)
    return PageResponseModel[MemberTeamDto].from_page(page)


@router.get(
    "/all",
    response_model=list[Member],
    summary="Search all members",
)
@handle_http_errors
async def get_all_members(
    repo: MemberRepoDep,
    username: str | None = None,
    team_name: str | None = None,
    age_goe: int | None = None,
    age_loe: int | None = None,
) -> list[Member]:
    """
    Get every member matching the filters, ordered by id.

    Example:
        GET /members/all?age_goe=20&age_loe=30
    """
    condition = MemberSearchCondition(
        username_eq=username,
        team_name_eq=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )
    return await repo.search(condition)
