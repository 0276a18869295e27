from __future__ import annotations

from .dom import NOT_FOUND, Found, ascend_until, parse_html
from .locator import LocatedSection, locate_section
from .pipeline import ExtractionResult, run_extraction
from .strategy import TEMPLATES, ExtractionStrategy, get_template
from .validate import ValidatedBatch, validate_records
from .vendors import VendorRecord, extract_vendors

"""
Vendor extractor slice.

Pure HTML -> vendor list for one trading day at one location. Nothing in
this package touches the network or the environment.

Public API:
- run_extraction(doc, target_header=..., date_token=..., location_filter=..., strategy=...)
    -> ExtractionResult
- locate_section / extract_vendors / validate_records: the three stages
- ExtractionStrategy, TEMPLATES, get_template: per-template selectors
- ascend_until, Found, NOT_FOUND: the shared ancestor walk
"""

__all__ = [
    "ExtractionResult",
    "ExtractionStrategy",
    "Found",
    "LocatedSection",
    "NOT_FOUND",
    "TEMPLATES",
    "ValidatedBatch",
    "VendorRecord",
    "ascend_until",
    "extract_vendors",
    "get_template",
    "locate_section",
    "parse_html",
    "run_extraction",
    "validate_records",
]
