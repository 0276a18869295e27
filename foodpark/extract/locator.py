# foodpark/extract/locator.py
"""
Section locator: find the page section listing vendors for one date and
location.

The page repeats the same block layout for every trading day, and each day's
block contains one sub-section per site. Nothing carries a stable id, so the
section is found by text:

  1. the first date header whose trimmed text equals the target header,
  2. its nearest ancestor matching the container selector,
  3. inside that, the first location header containing the location filter
     (case-insensitive); with no match, the next container further out is
     searched instead,
  4. that header's own nearest container ancestor.

First match wins at both levels. Duplicates are not treated as ambiguous.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import Tag

from foodpark.exceptions import LocationNotFound, TargetNotFound

from .dom import Found, ascend_until, node_text
from .strategy import ExtractionStrategy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocatedSection:
    """The section root for one (date, location) pair."""

    root: Tag
    location: str


def _find_date_header(doc: Tag, target_header: str, strategy: ExtractionStrategy) -> Tag:
    headers = doc.select(strategy.date_selector)
    log.debug(
        "Scanning %d date headers (%s) for %r",
        len(headers),
        strategy.date_selector,
        target_header,
    )
    for header in headers:
        if node_text(header) == target_header:
            return header
    raise TargetNotFound(target_header, f"no header matched selector {strategy.date_selector!r}")


def _find_location_header(
    container: Tag,
    location_filter: str,
    strategy: ExtractionStrategy,
) -> Tag | None:
    needle = location_filter.lower()
    for header in container.select(strategy.location_selector):
        if needle in header.get_text().lower():
            return header
    return None


def locate_section(
    doc: Tag,
    *,
    target_header: str,
    location_filter: str,
    strategy: ExtractionStrategy,
) -> LocatedSection:
    """
    Return the container enclosing the vendors for `target_header` at the
    location matching `location_filter`.

    When the date header's nearest container holds no matching location
    (the day heading in its own section, beside the location sections), the
    search moves out to the next enclosing container, up to the document root.

    Raises TargetNotFound / LocationNotFound; never returns the document root.
    """
    date_header = _find_date_header(doc, target_header, strategy)

    date_section = ascend_until(date_header, strategy.is_container)
    if not isinstance(date_section, Found):
        raise TargetNotFound(target_header, "date header has no enclosing section container")

    location_header = None
    while isinstance(date_section, Found):
        location_header = _find_location_header(date_section.node, location_filter, strategy)
        if location_header is not None:
            break
        log.debug("No location matching %r in this container; moving out", location_filter)
        date_section = ascend_until(date_section.node, strategy.is_container)

    if location_header is None:
        raise LocationNotFound(
            location_filter,
            f"no header matched selector {strategy.location_selector!r} around the date section",
        )
    location = node_text(location_header)

    location_section = ascend_until(location_header, strategy.is_container)
    if not isinstance(location_section, Found):
        raise LocationNotFound(
            location_filter,
            f"location header {location!r} has no enclosing section container",
        )

    log.info("Located section for %s at %s", target_header, location)
    return LocatedSection(root=location_section.node, location=location)


__all__ = ["LocatedSection", "locate_section"]
