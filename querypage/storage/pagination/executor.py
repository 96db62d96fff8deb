"""
Offset pagination with count-query elision.

``fetch_page`` runs the bounded content query first and only then decides
whether a separate COUNT query is needed:

- the content is short of a full page (``len(content) < limit``): no more
  rows exist past this page, so ``total = offset + len(content)`` and the
  count query is skipped. On the first page this is simply
  ``len(content)``;
- the content fills the page: more rows may exist, so the count query is
  issued once with the same filter.

The two calls are sequential and meant to run in the same session, so
the count sees the snapshot the content was read from.
"""

from typing import Sequence, TypeVar

from sqlalchemy import ColumnElement

from querypage.constants import STAGE_COUNT, STAGE_FETCH
from querypage.exceptions import InvalidPageRequest, QueryExecutionError
from querypage.logging import logger
from querypage.schemas.page import Page, PageRequest, SortOrder
from querypage.storage.pagination.protocol import QueryExecutor

Row = TypeVar("Row")


def infer_total(page: PageRequest, content_size: int) -> int | None:
    """
    Infer the exact total from the content page alone, if possible.

    Args:
        page: The page request the content was fetched for.
        content_size: Number of rows the content query returned.

    Returns:
        ``page.offset + content_size`` when the page is short (the final
        page), otherwise None, meaning a count query is required.
    """
    if content_size < page.limit:
        return page.offset + content_size
    return None


async def fetch_page(
    where: ColumnElement[bool] | None,
    sort: Sequence[SortOrder] | None,
    page: PageRequest,
    executor: QueryExecutor[Row],
) -> Page[Row]:
    """
    Fetch one page of rows, counting the total only when necessary.

    Args:
        where: Predicate from ``compose``, or None to select all rows.
            The same object is passed to both fetch_rows and count_rows.
        sort: Sort criteria. None means use ``page.sort``.
        page: Validated offset/limit request.
        executor: Query-execution capability.

    Returns:
        Page with content, offset, limit and exact total.

    Raises:
        InvalidPageRequest: If the executor rejects the sort criteria.
        QueryExecutionError: If the content fetch or the count query fails,
            or returns a result inconsistent with the page. A failed fetch
            means no count is attempted; a failed count discards the
            content.
    """
    order = tuple(page.sort if sort is None else sort)

    try:
        content = list(
            await executor.fetch_rows(
                where, order, offset=page.offset, limit=page.limit
            )
        )
    except (InvalidPageRequest, QueryExecutionError):
        raise
    except Exception as ex:
        logger.error(f"Content query failed at offset={page.offset}: {ex}")
        raise QueryExecutionError(STAGE_FETCH, str(ex)) from ex

    if len(content) > page.limit:
        raise QueryExecutionError(
            STAGE_FETCH,
            f"returned {len(content)} rows for limit {page.limit}",
        )

    total = infer_total(page, len(content))
    if total is not None:
        logger.debug(
            f"Count query elided: offset={page.offset} limit={page.limit} "
            f"rows={len(content)} total={total}"
        )
    else:
        try:
            total = await executor.count_rows(where)
        except QueryExecutionError:
            raise
        except Exception as ex:
            logger.error(f"Count query failed after full page: {ex}")
            raise QueryExecutionError(STAGE_COUNT, str(ex)) from ex

        if total < len(content):
            raise QueryExecutionError(
                STAGE_COUNT,
                f"count {total} is smaller than page content size {len(content)}",
            )
        logger.debug(
            f"Count query issued: offset={page.offset} limit={page.limit} "
            f"total={total}"
        )

    return Page(
        content=content, offset=page.offset, limit=page.limit, total=total
    )
