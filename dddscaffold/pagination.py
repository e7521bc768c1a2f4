"""Paging parameters and paged results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class Pagination:
    """One page request: 1-based page number and page size."""

    page: int
    page_size: int

    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def limit(self) -> int:
        return self.page_size


def new_pagination(page: int, page_size: int) -> Pagination:
    """Build a Pagination, clamping the page and page size into range."""
    if page <= 0:
        page = 1
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    if page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    return Pagination(page=page, page_size=page_size)


@dataclass
class PaginatedResult(Generic[T]):
    """A page of items with the totals needed to page through the rest."""

    items: list[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_pages: int = 0


def paginate(items: list[T], total_count: int, page: int, page_size: int) -> PaginatedResult[T]:
    """Wrap one page of items, computing the number of pages."""
    if page_size <= 0:
        raise ValueError("page size must be greater than 0")
    total_pages, remainder = divmod(total_count, page_size)
    if remainder > 0:
        total_pages += 1
    return PaginatedResult(
        items=list(items),
        total_count=total_count,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )