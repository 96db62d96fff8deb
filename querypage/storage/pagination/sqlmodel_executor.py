"""
QueryExecutor backed by a SQLModel async session.

The executor wraps a base ``Select`` that already carries the FROM
clause, joins and projected columns. It adds the WHERE clause (only for
a non-None filter), ORDER BY and OFFSET/LIMIT for the content query, and
wraps the filtered base statement in ``SELECT count(*)`` for the count
query, so content and count always share joins and filter.

Example:
    ```python
    from sqlmodel import select

    executor = SQLModelQueryExecutor(
        session,
        select(Member).outerjoin(Team, Member.team_id == Team.id),
        sort_columns={"username": Member.username, "age": Member.age},
        tie_breaker=Member.id,
    )
    page = await fetch_page(compose(condition), None, request, executor)
    ```
"""

from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import ColumnElement, Select
from sqlmodel import func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from querypage.exceptions import InvalidPageRequest
from querypage.schemas.page import NullHandling, SortDirection, SortOrder

Row = TypeVar("Row")


class SQLModelQueryExecutor(Generic[Row]):
    """
    Run content and count queries for one base statement in one session.

    Attributes:
        session: Async session both queries run in.
        statement: Base SELECT without WHERE/ORDER BY/LIMIT.
        sort_columns: Whitelist mapping sortable field names to columns.
        tie_breaker: Unique column appended to every ORDER BY (ascending)
            unless already sorted on, so OFFSET paging is deterministic.
        row_mapper: Optional conversion applied to each fetched row.
    """

    def __init__(
        self,
        session: AsyncSession,
        statement: Select[Any],
        sort_columns: Mapping[str, ColumnElement[Any]] | None = None,
        tie_breaker: ColumnElement[Any] | None = None,
        row_mapper: Callable[[Any], Row] | None = None,
    ):
        self.session = session
        self.statement = statement
        self.sort_columns = dict(sort_columns or {})
        self.tie_breaker = tie_breaker
        self.row_mapper = row_mapper

    def order_by_clauses(
        self, sort: Sequence[SortOrder]
    ) -> list[ColumnElement[Any]]:
        """
        Translate sort criteria into ORDER BY clauses.

        Args:
            sort: Sort criteria, applied left to right.

        Returns:
            ORDER BY clauses, ending with the tie breaker if configured.

        Raises:
            InvalidPageRequest: If a field is not in sort_columns.
        """
        clauses = []
        sorted_columns = []
        for order in sort:
            column = self.sort_columns.get(order.field)
            if column is None:
                raise InvalidPageRequest(
                    f"Cannot sort by '{order.field}'. "
                    f"Sortable fields: {', '.join(sorted(self.sort_columns))}"
                )
            sorted_columns.append(column)

            clause = (
                column.desc()
                if order.direction == SortDirection.DESC
                else column.asc()
            )
            if order.nulls == NullHandling.FIRST:
                clause = clause.nulls_first()
            elif order.nulls == NullHandling.LAST:
                clause = clause.nulls_last()
            clauses.append(clause)

        if self.tie_breaker is not None and not any(
            column is self.tie_breaker for column in sorted_columns
        ):
            clauses.append(self.tie_breaker.asc())

        return clauses

    def filtered(self, where: ColumnElement[bool] | None) -> Select[Any]:
        if where is None:
            return self.statement
        return self.statement.where(where)

    async def fetch_rows(
        self,
        where: ColumnElement[bool] | None,
        sort: Sequence[SortOrder],
        offset: int,
        limit: int,
    ) -> list[Row]:
        """
        Execute the bounded content query.

        Raises:
            InvalidPageRequest: If a sort field is not sortable.
            SQLAlchemyError: If the database query fails.
        """
        query = (
            self.filtered(where)
            .order_by(*self.order_by_clauses(sort))
            .offset(offset)
            .limit(limit)
        )
        results = await self.session.exec(query)
        rows = results.all()
        if self.row_mapper is not None:
            return [self.row_mapper(row) for row in rows]
        return list(rows)

    async def count_rows(self, where: ColumnElement[bool] | None) -> int:
        """
        Count all rows the content query could return.

        Raises:
            SQLAlchemyError: If the database query fails.
        """
        subquery = self.filtered(where).order_by(None).subquery()
        count_query = select(func.count()).select_from(subquery)
        result = await self.session.exec(count_query)
        return result.one()
