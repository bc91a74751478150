"""Keyword-filtered, offset-limited search shared by every resource collection.

The ``sort`` value is accepted and echoed back in the result but never applied
to ordering; items come back in storage order.
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Callable, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from reservations_api.api.core.exceptions.base import InvalidPaginationError

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One page of a search plus the metadata needed to request the others."""

    items: list[T]
    current_page: int
    items_per_page: int
    total_items: int
    total_pages: int
    keyword: str | None = None
    sort: str | None = None

    def map(self, transform: Callable[[T], Any]) -> "Page[Any]":
        """Return the same page with every item transformed."""
        return Page(
            items=[transform(item) for item in self.items],
            current_page=self.current_page,
            items_per_page=self.items_per_page,
            total_items=self.total_items,
            total_pages=self.total_pages,
            keyword=self.keyword,
            sort=self.sort,
        )


def validate_page_params(current_page: int, items_per_page: int) -> int:
    """Reject non-positive page parameters before any query is issued.

    Returns the row offset of the first item on the page.
    """
    if current_page <= 0:
        raise InvalidPaginationError(
            {"description": "current_page must be greater than 0."}
        )
    if items_per_page <= 0:
        raise InvalidPaginationError(
            {"description": "items_per_page must be greater than 0."}
        )
    return items_per_page * (current_page - 1)


def count_pages(total_items: int, items_per_page: int) -> int:
    """Ceiling division: number of pages needed for ``total_items``."""
    return -(-total_items // items_per_page)


def paged_search(
    collection: Sequence[T],
    keyword: str | None,
    current_page: int,
    items_per_page: int,
    sort: str | None = None,
    key: Callable[[T], str] = attrgetter("name"),
) -> Page[T]:
    """In-memory paged search over an already loaded collection.

    Matching is a case-sensitive substring test on ``key(item)``.
    """
    offset = validate_page_params(current_page, items_per_page)

    filtered = list(collection)
    if keyword:
        filtered = [item for item in filtered if keyword in key(item)]

    total_items = len(filtered)
    items = filtered[offset : offset + items_per_page]

    return Page(
        items=items,
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items,
        total_pages=count_pages(total_items, items_per_page),
        keyword=keyword,
        sort=sort,
    )


async def paginate_query(
    db: AsyncSession,
    stmt: Select,
    name_column: InstrumentedAttribute,
    keyword: str | None,
    current_page: int,
    items_per_page: int,
    sort: str | None = None,
) -> Page[Any]:
    """Run the paged search rules against a SQL ``Select``.

    Keyword matching uses ``LIKE`` with wildcards in the keyword escaped.
    """
    offset = validate_page_params(current_page, items_per_page)

    if keyword:
        stmt = stmt.where(name_column.contains(keyword, autoescape=True))

    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total_items = (await db.execute(count_stmt)).scalar_one()

    items = []
    # Pages past the end are empty; skip the slice query
    if offset < total_items:
        result = await db.execute(stmt.offset(offset).limit(items_per_page))
        items = list(result.scalars().all())

    return Page(
        items=items,
        current_page=current_page,
        items_per_page=items_per_page,
        total_items=total_items,
        total_pages=count_pages(total_items, items_per_page),
        keyword=keyword,
        sort=sort,
    )
