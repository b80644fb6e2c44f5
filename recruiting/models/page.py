"""
Pagination primitives shared by every gateway.

Pages are zero-based, like the page index carried by the web forms.
"""

import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class PageRequest(BaseModel):
    page: int = Field(0, ge=0)
    size: int = Field(10, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """An ordered, size-bounded slice plus the total count."""
    content: List[T] = []
    page_number: int = 0
    page_size: int = 10
    total_elements: int = 0

    @computed_field
    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @classmethod
    def of(cls, content: List[T], page_request: PageRequest, total: int) -> "Page[T]":
        return cls(
            content=content,
            page_number=page_request.page,
            page_size=page_request.size,
            total_elements=total,
        )
