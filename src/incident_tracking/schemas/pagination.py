"""Generic pagination types shared by all list views.

PagedView[T]       — immutable page of items plus page-count metadata (service layer).
QueryableSource[T] — what ``from_source`` needs from a data source: a count and a slice.
PagedResponse[T]   — Pydantic model for HTTP responses (serializable).
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel

from incident_tracking.exceptions import InvalidPageSizeError
from incident_tracking.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise InvalidPageSizeError(page_size)


@dataclass(frozen=True)
class PagedView(Generic[T]):
    """One page of a larger ordered collection.

    Holds its own copy of the items, so the view is unaffected by later
    changes to the list it was built from. ``total_pages`` is derived from
    ``total_count`` once, at construction::

        view = PagedView(items=rows, total_count=21, page_index=3, page_size=10)
        view.total_pages        # 3
        view.has_next_page      # False

    ``page_index`` is not range-checked: a page before the first or past the
    last is a valid, usually empty, view. ``page_size`` below 1 raises
    ``InvalidPageSizeError``.
    """

    items: tuple[T, ...]
    total_count: int
    page_index: int
    page_size: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        _check_page_size(self.page_size)
        # frozen, so assign through object
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(
            self, "total_pages", (self.total_count + self.page_size - 1) // self.page_size
        )

    @property
    def has_previous_page(self) -> bool:
        return self.page_index > 1

    @property
    def has_next_page(self) -> bool:
        return self.page_index < self.total_pages

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class QueryableSource(Protocol[T]):
    """An ordered collection that can report its size and return a slice of itself."""

    async def count(self) -> int: ...

    async def slice(self, offset: int, limit: int) -> Sequence[T]: ...


async def from_source(
    source: QueryableSource[T], page_index: int, page_size: int
) -> PagedView[T]:
    """Fetch page ``page_index`` (1-based) of ``source`` and wrap it in a PagedView.

    Awaits the total count, then the slice at ``(page_index - 1) * page_size``.
    Errors raised by either call propagate unchanged and no view is built.
    """
    _check_page_size(page_size)

    total_count = await source.count()
    items = await source.slice((page_index - 1) * page_size, page_size)
    view = PagedView(
        items=tuple(items),
        total_count=total_count,
        page_index=page_index,
        page_size=page_size,
    )

    logger.debug(
        "page_fetched",
        page_index=page_index,
        page_size=page_size,
        total_count=total_count,
        total_pages=view.total_pages,
        item_count=len(view),
    )
    return view


class PagedResponse(BaseModel, Generic[T]):
    """Pydantic model for paginated HTTP responses.

    ``from_attributes`` is set so ``model_validate`` reads a ``PagedView``
    directly, including its ``has_previous_page``/``has_next_page``
    properties::

        # schemas/incident.py
        IncidentListResponse = PagedResponse[IncidentResponse]

        # routers/incident.py
        view = await list_incidents(db, page, page_size)
        return IncidentListResponse.model_validate(view)

    Use this in **routers** only. Services return ``PagedView``.
    """

    model_config = {"from_attributes": True}

    items: list[T]
    page_index: int
    page_size: int
    total_count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
