from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, Field

from querypage.schemas.page import Page

T = TypeVar("T")


class MetadataModel(BaseModel):  # type: ignore[misc]
    page: Annotated[int, Field(ge=1)]
    per_page: Annotated[int, Field(ge=1)]
    total: Annotated[int, Field(ge=0)]
    pages: Annotated[int, Field(ge=0)]


class PageResponseModel(BaseModel, Generic[T]):  # type: ignore[misc]
    items: list[T]
    offset: Annotated[int, Field(ge=0)]
    limit: Annotated[int, Field(ge=1)]
    total: Annotated[int, Field(ge=0)]
    meta: MetadataModel

    @classmethod
    def from_page(cls, page: Page[T]) -> "PageResponseModel[T]":
        return cls(
            items=page.content,
            offset=page.offset,
            limit=page.limit,
            total=page.total,
            meta=MetadataModel(
                page=page.number,
                per_page=page.limit,
                total=page.total,
                pages=page.total_pages,
            ),
        )
