# foodpark/extract/pipeline.py
"""
locate -> extract -> validate over one parsed page.

The pipeline takes plain strings (the rendered date header, the date token
expected in order URLs, the location filter) plus a strategy. Working out
which day to target and how to render its header is the caller's job.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bs4 import Tag

from .locator import locate_section
from .strategy import ExtractionStrategy
from .validate import validate_records
from .vendors import VendorRecord, extract_vendors

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    target_date: str
    location: str
    records: tuple[VendorRecord, ...]
    any_walk_up_only: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "target_date": self.target_date,
            "location": self.location,
            "any_walk_up_only": self.any_walk_up_only,
            "vendors": [r.to_dict() for r in self.records],
        }


def run_extraction(
    doc: Tag,
    *,
    target_header: str,
    date_token: str,
    location_filter: str,
    strategy: ExtractionStrategy,
) -> ExtractionResult:
    """
    Extract the vendor list for one date and location.

    Any ExtractionError propagates unchanged; a partial list is never returned.
    """
    section = locate_section(
        doc,
        target_header=target_header,
        location_filter=location_filter,
        strategy=strategy,
    )
    records = extract_vendors(section.root, date_token=date_token, strategy=strategy)
    batch = validate_records(records, date_token=date_token)

    log.info(
        "Found %d vendors for %s at %s (walk-up only: %s)",
        len(batch.records),
        date_token,
        section.location,
        batch.any_walk_up_only,
    )
    return ExtractionResult(
        target_date=date_token,
        location=section.location,
        records=batch.records,
        any_walk_up_only=batch.any_walk_up_only,
    )


__all__ = ["ExtractionResult", "run_extraction"]
