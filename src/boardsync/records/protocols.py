"""Collaborator interface the reconciler depends on."""

from __future__ import annotations

from collections.abc import Sequence  # noqa: TC003
from typing import Protocol

from boardsync.records.models import Platform, RecordFields, SyncRecord  # noqa: TC001


class RecordSource(Protocol):
    """A remote record store that can be listed, created into and patched.

    Implementations raise TransportError subclasses on any remote failure.
    """

    platform: Platform

    async def fetch_records(self) -> Sequence[SyncRecord]:
        """Return every record, in the order the remote API lists them."""
        ...

    async def create_record(self, fields: RecordFields) -> str:
        """Create a record seeded with all logical fields and return its remote id."""
        ...

    async def update_record(self, remote_id: str, fields: RecordFields) -> None:
        """Change only the given logical fields of an existing record."""
        ...

    async def aclose(self) -> None:
        """Release the underlying HTTP client."""
        ...
