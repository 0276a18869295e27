# foodpark/extract/validate.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from foodpark.exceptions import InvalidRecord

from .vendors import VendorRecord


@dataclass(frozen=True)
class ValidatedBatch:
    records: tuple[VendorRecord, ...]
    any_walk_up_only: bool


def validate_record(index: int, record: VendorRecord, date_token: str) -> None:
    if not record.name or not record.name.strip():
        raise InvalidRecord(index, "empty vendor name")
    if record.accepts_preorder != (record.order_url is not None):
        raise InvalidRecord(
            index,
            f"accepts_preorder={record.accepts_preorder} but order_url={record.order_url!r}",
        )
    if record.order_url is not None and date_token not in record.order_url:
        raise InvalidRecord(index, f"order_url {record.order_url!r} lacks {date_token!r}")


def validate_records(records: Sequence[VendorRecord], *, date_token: str) -> ValidatedBatch:
    """
    Check every record against the VendorRecord invariants and compute the
    walk-up-only flag the message composer uses to decide on a footnote.
    """
    for index, record in enumerate(records):
        validate_record(index, record, date_token)

    return ValidatedBatch(
        records=tuple(records),
        any_walk_up_only=any(r.order_url is None for r in records),
    )


__all__ = ["ValidatedBatch", "validate_record", "validate_records"]
