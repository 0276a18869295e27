# foodpark/extract/vendors.py
"""
Vendor extractor: turn the order buttons inside a located section into
VendorRecord rows, in document order.

A button with an order link must point at the target day's menu (the date
token appears verbatim in the URL); anything else means the page is showing
a different day than we think, and the whole run stops with DateMismatch.
A button without a link is a walk-up-only vendor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import Tag

from foodpark.exceptions import DateMismatch, NameNotFound

from .strategy import ExtractionStrategy

log = logging.getLogger(__name__)

# --- Public data model -------------------------------------------------------


@dataclass(frozen=True)
class VendorRecord:
    """
    One vendor trading on the target day.

    Fields:
      - name: display name; ends with the walk-up marker when there is no order link
      - order_url: pre-order link for the target day, or None
      - accepts_preorder: True exactly when order_url is set
    """

    name: str
    order_url: str | None
    accepts_preorder: bool

    def to_dict(self) -> dict[str, str | bool | None]:
        return {
            "name": self.name,
            "order_url": self.order_url,
            "accepts_preorder": self.accepts_preorder,
        }


# --- Extraction ----------------------------------------------------------------


def _order_url(anchor: Tag) -> str | None:
    href = (anchor.get("href") or "").strip()
    return href or None


def extract_vendors(
    section_root: Tag,
    *,
    date_token: str,
    strategy: ExtractionStrategy,
) -> list[VendorRecord]:
    """
    Build one VendorRecord per order anchor under `section_root`.

    Raises DateMismatch on the first link missing `date_token` and
    NameNotFound when an anchor's name cannot be resolved. No records are
    returned in either case.
    """
    records: list[VendorRecord] = []

    for anchor in section_root.select(strategy.anchor_selector):
        url = _order_url(anchor)
        if url is not None and date_token not in url:
            raise DateMismatch(date_token, url)

        name = strategy.resolve_name(anchor)
        if not name:
            raise NameNotFound(url)

        if url is None:
            name += strategy.walk_up_marker

        records.append(VendorRecord(name=name, order_url=url, accepts_preorder=url is not None))

    log.debug("Extracted %d vendors with %s", len(records), strategy.anchor_selector)
    return records


__all__ = ["VendorRecord", "extract_vendors"]
