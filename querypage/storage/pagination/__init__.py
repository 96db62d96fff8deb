"""
Count-elided offset pagination.

Example:
    ```python
    from querypage.storage.pagination import SQLModelQueryExecutor, fetch_page
    from querypage.storage.predicates import compose

    executor = SQLModelQueryExecutor(session, select(Member))
    page = await fetch_page(compose(condition), None, request, executor)

    print(f"Page {page.number} of {page.total_pages}")
    print(f"Total items: {page.total}")
    ```
"""

from querypage.storage.pagination.executor import fetch_page, infer_total
from querypage.storage.pagination.protocol import QueryExecutor
from querypage.storage.pagination.sqlmodel_executor import (
    SQLModelQueryExecutor,
)

__all__ = [
    "QueryExecutor",
    "SQLModelQueryExecutor",
    "fetch_page",
    "infer_total",
]
