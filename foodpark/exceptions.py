# foodpark/exceptions.py
"""
Shared exception classes used across the codebase.

The extraction errors form one taxonomy rooted at ExtractionError. Every one
of them is terminal for a run: the pipeline never returns a partial vendor
list alongside an error.
"""

from __future__ import annotations


class ExtractionError(RuntimeError):
    """Base class for failures while reading vendors out of a page."""


class TargetNotFound(ExtractionError):
    """
    Raised when no date header matches the target text, or the matching
    header has no enclosing page-section container.
    """

    def __init__(self, header: str, detail: str | None = None) -> None:
        self.header = header
        msg = f"Failed to find a page section for date header {header!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class LocationNotFound(ExtractionError):
    """
    Raised when the date section has no location header matching the filter,
    or the matching header has no enclosing container.
    """

    def __init__(self, location_filter: str, detail: str | None = None) -> None:
        self.location_filter = location_filter
        msg = f"Failed to find location matching {location_filter!r}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class DateMismatch(ExtractionError):
    """Raised when an order URL does not carry the target date token."""

    def __init__(self, date_token: str, url: str) -> None:
        self.date_token = date_token
        self.url = url
        super().__init__(f"Failed to find target date string {date_token} in URL {url}")


class NameNotFound(ExtractionError):
    """Raised when no display name can be resolved for an order anchor."""

    def __init__(self, url: str | None) -> None:
        self.url = url
        super().__init__(f"Failed to find vendor name for {url or '<no url>'}")


class InvalidRecord(ExtractionError):
    """Raised by the record validator when a vendor record breaks an invariant."""

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Vendor record #{index} is invalid: {reason}")


class FetchError(RuntimeError):
    """Raised when the trading page cannot be fetched."""


class DeliveryError(RuntimeError):
    """Raised when the Slack webhook rejects or cannot receive a message."""


__all__ = [
    "ExtractionError",
    "TargetNotFound",
    "LocationNotFound",
    "DateMismatch",
    "NameNotFound",
    "InvalidRecord",
    "FetchError",
    "DeliveryError",
]
