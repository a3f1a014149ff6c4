"""Exceptions raised while building pages."""

from __future__ import annotations


class PaginationError(ValueError):
    """Base class for invalid paging input."""

    def __init__(self, value: int, message: str):
        self.value = value
        super().__init__(message)


class InvalidPageNumber(PaginationError):
    """Raised when a page number below 1 is requested."""

    def __init__(self, value: int):
        super().__init__(value, f"page_number = {value}. Page number cannot be below 1.")


class InvalidPageSize(PaginationError):
    """Raised when a page size below 1 is requested."""

    def __init__(self, value: int):
        super().__init__(value, f"page_size = {value}. Page size cannot be less than 1.")


class InvalidTotalItemCount(PaginationError):
    """Raised when a negative total item count is supplied."""

    def __init__(self, value: int):
        super().__init__(
            value, f"total_item_count = {value}. Total item count cannot be less than 0."
        )


class SubsetTooLarge(PaginationError):
    """Raised when a recast page receives more items than its page size."""

    def __init__(self, value: int, page_size: int):
        self.page_size = page_size
        super().__init__(
            value,
            f"subset has {value} items but the page size is {page_size}.",
        )
