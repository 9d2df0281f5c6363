"""
Page-by-page fetching for the explorer's list endpoints.

List endpoints (txlist, txlistinternal, tokentx) never say "this was the last
page". The end is inferred from the page itself:

- an empty page, or a page shorter than `page_size`, ends the listing;
- a full page means there may be more, so the next page is requested;
- an envelope with status "0" and the exact message "No transactions found"
  means the address has no records at all.

The explorers also never return more than RECORD_CEILING records for one
query (page * offset must stay <= 10000). Requesting past it returns nothing
useful, so the loop stops there and returns what it has, with a warning.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, List, Optional, TypeVar

from .envelope import Envelope, unwrap

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Five full pages reach the ceiling, which fits the free tier's 5 requests/second.
PAGE_SIZE = 2000
RECORD_CEILING = 10_000

# Exact text the explorers send in place of an empty result.
EMPTY_RESULT_MESSAGE = "No transactions found"


class PageOutcome(Enum):
    NEXT_PAGE = "next_page"
    EXHAUSTED = "exhausted"
    PARTIAL_PAGE = "partial_page"
    NO_RECORDS = "no_records"
    CEILING_REACHED = "ceiling_reached"


@dataclass
class PaginationCursor(Generic[T]):
    page_size: int = PAGE_SIZE
    ceiling: int = RECORD_CEILING
    page_number: int = 1
    accumulated: List[T] = field(default_factory=list)
    active: bool = True
    outcome: Optional[PageOutcome] = None

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive.")
        if self.page_number < 1:
            raise ValueError("page_number starts at 1.")

    def would_exceed_ceiling(self) -> bool:
        return self.page_number * self.page_size > self.ceiling

    def check_ceiling(self) -> bool:
        """Return True if the current page may be requested, otherwise stop the cursor."""
        if self.would_exceed_ceiling():
            self._stop(PageOutcome.CEILING_REACHED)
            return False
        return True

    def consume(self, records: List[T]) -> PageOutcome:
        count = len(records)
        if count == 0:
            return self._stop(PageOutcome.EXHAUSTED)

        self.accumulated.extend(records)
        if count < self.page_size:
            return self._stop(PageOutcome.PARTIAL_PAGE)

        self.page_number += 1
        self.outcome = PageOutcome.NEXT_PAGE
        return self.outcome

    def finish_empty(self) -> PageOutcome:
        return self._stop(PageOutcome.NO_RECORDS)

    def _stop(self, outcome: PageOutcome) -> PageOutcome:
        self.active = False
        self.outcome = outcome
        return outcome


def fetch_all_pages(
    fetch_page: Callable[[int, int], Envelope[List[T]]],
    page_size: int = PAGE_SIZE,
    ceiling: int = RECORD_CEILING,
) -> List[T]:
    """
    Drive `fetch_page(page, offset)` until the listing ends or the ceiling is hit.

    Errors from `fetch_page` propagate unchanged. A success status paired with a
    failure-shaped payload, or any failure message other than the empty-result
    one, raises ApiResponseError.
    """
    cursor: PaginationCursor[T] = PaginationCursor(page_size=page_size, ceiling=ceiling)

    while cursor.active:
        if not cursor.check_ceiling():
            logger.warning(
                "Address has more than %d records limit, returning the first %d.",
                ceiling,
                len(cursor.accumulated),
            )
            break

        envelope = fetch_page(cursor.page_number, cursor.page_size)

        if not envelope.is_ok and envelope.message == EMPTY_RESULT_MESSAGE:
            cursor.finish_empty()
        else:
            page_number = cursor.page_number
            outcome = cursor.consume(unwrap(envelope))
            logger.debug("page %d: %s", page_number, outcome.value)

    return cursor.accumulated
