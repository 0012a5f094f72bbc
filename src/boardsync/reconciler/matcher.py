"""Identity matching between the two platforms' records.

Records match iff their identity keys (ticket subject / item name) are equal
strings. No case folding, trimming or fuzzy matching is applied.
"""

from __future__ import annotations

from collections.abc import Iterable  # noqa: TC003
from typing import TypeVar

from boardsync.records.models import SyncRecord

R = TypeVar("R", bound=SyncRecord)


def build_index(records: Iterable[R]) -> dict[str, R]:
    """Map identity key to record.

    When two records share a key the later one replaces the earlier one.
    """
    index: dict[str, R] = {}
    for record in records:
        index[record.key] = record
    return index


def lookup(index: dict[str, R], key: str) -> R | None:
    """Find the record with exactly this identity key."""
    return index.get(key)
