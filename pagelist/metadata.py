"""Page metadata: counts, item ranges and boundary flags for one page.

Everything except ``page_number``, ``page_size`` and ``total_item_count`` is
derived on access, so two instances built from the same triple always agree.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InvalidPageNumber, InvalidPageSize, InvalidTotalItemCount

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class PageMetadata:
    """Computed pagination state for a single page.

    ``page_number`` may exceed ``page_count``; such pages report no flags and
    a zero item range instead of raising.
    """

    page_number: int
    page_size: int
    total_item_count: int

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise InvalidPageNumber(self.page_number)
        if self.page_size < 1:
            raise InvalidPageSize(self.page_size)
        if self.total_item_count < 0:
            raise InvalidTotalItemCount(self.total_item_count)

    @classmethod
    def empty(cls, page_size: int = DEFAULT_PAGE_SIZE) -> PageMetadata:
        """Metadata for page 1 of an empty sequence."""
        return cls(page_number=1, page_size=page_size, total_item_count=0)

    @property
    def page_count(self) -> int:
        if self.total_item_count <= 0:
            return 0
        return math.ceil(self.total_item_count / self.page_size)

    @property
    def _in_range(self) -> bool:
        page_count = self.page_count
        return page_count > 0 and self.page_number <= page_count

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def has_previous_page(self) -> bool:
        return self._in_range and self.page_number > 1

    @property
    def has_next_page(self) -> bool:
        return self._in_range and self.page_number < self.page_count

    @property
    def is_first_page(self) -> bool:
        return self._in_range and self.page_number == 1

    @property
    def is_last_page(self) -> bool:
        return self._in_range and self.page_number == self.page_count

    @property
    def first_item_on_page(self) -> int:
        if not self._in_range:
            return 0
        return self.offset + 1

    @property
    def last_item_on_page(self) -> int:
        if not self._in_range:
            return 0
        return min(self.first_item_on_page + self.page_size - 1, self.total_item_count)

    def metadata(self) -> PageMetadata:
        """Return a plain ``PageMetadata`` copy, dropping any subclass payload."""
        return PageMetadata(
            page_number=self.page_number,
            page_size=self.page_size,
            total_item_count=self.total_item_count,
        )

    def to_dict(self) -> dict[str, int | bool]:
        return {
            "page_number": self.page_number,
            "page_size": self.page_size,
            "total_item_count": self.total_item_count,
            "page_count": self.page_count,
            "has_previous_page": self.has_previous_page,
            "has_next_page": self.has_next_page,
            "is_first_page": self.is_first_page,
            "is_last_page": self.is_last_page,
            "first_item_on_page": self.first_item_on_page,
            "last_item_on_page": self.last_item_on_page,
        }
