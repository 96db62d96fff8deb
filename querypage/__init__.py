"""
Conditional search and count-elided pagination over SQLModel entities.

The two public entry points are re-exported here:

- ``compose``: turn a search condition into a single filter expression
  (or ``None`` when no criterion is present).
- ``fetch_page``: run a bounded content query and issue the total-count
  query only when the content page cannot prove the total.
"""

from querypage.storage.pagination.executor import fetch_page
from querypage.storage.predicates import compose

__all__ = ["compose", "fetch_page"]
