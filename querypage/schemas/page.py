"""
Page request and page result models for offset pagination.

A ``PageRequest`` is validated when it is built: a negative offset, a
non-positive limit or a limit above MAX_PAGE_SIZE raises
``InvalidPageRequest`` right away, so an invalid request never reaches
the query executor.

Example:
    ```python
    from querypage.schemas.page import PageRequest, SortOrder

    # Explicit offset/limit
    request = PageRequest(offset=20, limit=10)

    # 1-indexed page number, sorted by username descending
    request = PageRequest.of(3, 10, sort=(SortOrder.parse("username,desc"),))
    ```
"""

import math
from enum import Enum
from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator, model_validator

from querypage.constants import MAX_PAGE_SIZE
from querypage.exceptions import InvalidPageRequest
from querypage.settings import app_settings

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class NullHandling(str, Enum):
    """Where NULL values go in the ordering; NATIVE leaves it to the database."""

    NATIVE = "native"
    FIRST = "first"
    LAST = "last"


class SortOrder(BaseModel):  # type: ignore[misc]
    """Single sort criterion: field name, direction and null placement."""

    model_config = {"frozen": True}

    field: str
    direction: SortDirection = SortDirection.ASC
    nulls: NullHandling = NullHandling.NATIVE

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """
        Parse the query-string form ``field[,direction[,nulls]]``.

        Args:
            value: Sort expression, e.g. ``"age"``, ``"username,desc"``
                or ``"team_name,asc,last"``.

        Returns:
            Parsed SortOrder.

        Raises:
            InvalidPageRequest: If the expression is empty or the direction
                or null handling is not recognized.
        """
        parts = [part.strip() for part in value.split(",")]
        if not parts[0] or len(parts) > 3:
            raise InvalidPageRequest(f"Invalid sort expression: {value!r}")

        try:
            direction = (
                SortDirection(parts[1].lower())
                if len(parts) > 1
                else SortDirection.ASC
            )
            nulls = (
                NullHandling(parts[2].lower())
                if len(parts) > 2
                else NullHandling.NATIVE
            )
        except ValueError:
            raise InvalidPageRequest(
                f"Invalid sort expression: {value!r}"
            ) from None

        return cls(field=parts[0], direction=direction, nulls=nulls)


class PageRequest(BaseModel):  # type: ignore[misc]
    """
    Offset/limit pagination parameters with an optional ordering.

    Attributes:
        offset: Number of rows to skip (>= 0).
        limit: Maximum number of rows in the page (1..MAX_PAGE_SIZE).
        sort: Ordered sort criteria, applied left to right.
    """

    model_config = {"frozen": True}

    offset: int = 0
    limit: int = Field(
        default_factory=lambda: app_settings.DEFAULT_PAGE_SIZE,
        validate_default=True,
    )
    sort: tuple[SortOrder, ...] = ()

    @field_validator("offset")
    @classmethod
    def _check_offset(cls, value: int) -> int:
        if value < 0:
            raise InvalidPageRequest(
                f"offset must be non-negative, got {value}"
            )
        return value

    @field_validator("limit")
    @classmethod
    def _check_limit(cls, value: int) -> int:
        if value < 1:
            raise InvalidPageRequest(f"limit must be positive, got {value}")
        if value > MAX_PAGE_SIZE:
            raise InvalidPageRequest(
                f"limit must not exceed {MAX_PAGE_SIZE}, got {value}"
            )
        return value

    @classmethod
    def of(
        cls, page: int, size: int, sort: tuple[SortOrder, ...] = ()
    ) -> "PageRequest":
        """
        Build a request from a 1-indexed page number and page size.

        Args:
            page: Page number, starting at 1.
            size: Number of rows per page.
            sort: Optional sort criteria.

        Returns:
            PageRequest with ``offset = (page - 1) * size``.

        Raises:
            InvalidPageRequest: If page < 1 or size is out of range.
        """
        if page < 1:
            raise InvalidPageRequest(f"page must be >= 1, got {page}")
        return cls(offset=(page - 1) * size, limit=size, sort=sort)


class Page(BaseModel, Generic[T]):  # type: ignore[misc]
    """
    One bounded slice of query results plus pagination metadata.

    ``total`` is always exact: either inferred from a short content page
    or taken from a count query. It is never smaller than the number of
    rows in ``content``.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    content: list[T]
    offset: Annotated[int, Field(ge=0)]
    limit: Annotated[int, Field(ge=1)]
    total: Annotated[int, Field(ge=0)]

    @model_validator(mode="after")
    def _check_bounds(self) -> "Page[T]":
        if len(self.content) > self.limit:
            raise ValueError(
                f"content has {len(self.content)} rows, limit is {self.limit}"
            )
        if self.total < len(self.content):
            raise ValueError(
                f"total {self.total} is smaller than content size {len(self.content)}"
            )
        return self

    @property
    def number(self) -> int:
        """1-indexed page number the offset falls into."""
        return self.offset // self.limit + 1

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total > 0 else 0

    @property
    def has_next(self) -> bool:
        return self.offset + len(self.content) < self.total

    @property
    def has_previous(self) -> bool:
        return self.offset > 0

    @property
    def is_first(self) -> bool:
        return not self.has_previous

    @property
    def is_last(self) -> bool:
        return not self.has_next
