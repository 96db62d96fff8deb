"""
Protocol definition for query executors.

Uses Python's structural subtyping (Protocol) to define the capability the
pagination core consumes, without requiring explicit inheritance. Any
object with matching ``fetch_rows``/``count_rows`` coroutines can be
passed to ``fetch_page``: the SQLModel-backed executor in production, an
AsyncMock or in-memory fake in tests.
"""

from typing import Protocol, Sequence, TypeVar, runtime_checkable

from sqlalchemy import ColumnElement

from querypage.schemas.page import SortOrder

Row = TypeVar("Row")


@runtime_checkable
class QueryExecutor(Protocol[Row]):
    """
    Protocol for the query-execution capability used by fetch_page.

    Both calls receive the very same ``where`` object. ``None`` means "no
    WHERE clause"; implementations must select all rows in that case.

    Type Parameters:
        Row: The type of the rows returned by fetch_rows.
    """

    async def fetch_rows(
        self,
        where: ColumnElement[bool] | None,
        sort: Sequence[SortOrder],
        offset: int,
        limit: int,
    ) -> list[Row]:
        """
        Fetch at most ``limit`` rows after skipping ``offset`` rows.

        Args:
            where: Combined predicate, or None for all rows.
            sort: Sort criteria, applied left to right.
            offset: Number of rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            Rows ordered per ``sort``.
        """
        ...

    async def count_rows(self, where: ColumnElement[bool] | None) -> int:
        """
        Count all rows matching ``where``.

        Args:
            where: Combined predicate, or None for all rows.

        Returns:
            Non-negative row count.
        """
        ...
