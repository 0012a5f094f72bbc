"""Shared pytest fixtures and configuration."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import pytest

from boardsync.records import (
    BoardItem,
    LogicalField,
    Platform,
    RecordFields,
    TicketRecord,
    TransportError,
)
from boardsync.state_store import Credentials, SyncStateStore


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")
    config.addinivalue_line("markers", "real: calls the live HubSpot / Monday.com APIs")


_ATTRIBUTES = {
    Platform.HUBSPOT: {
        LogicalField.TITLE: "subject",
        LogicalField.DESCRIPTION: "content",
        LogicalField.STATUS: "status",
        LogicalField.PRIORITY: "priority",
    },
    Platform.MONDAY: {
        LogicalField.TITLE: "name",
        LogicalField.DESCRIPTION: "content",
        LogicalField.STATUS: "status",
        LogicalField.PRIORITY: "priority",
    },
}


class InMemorySource:
    """RecordSource backed by a list, recording every mutation."""

    def __init__(self, platform: Platform, records: list[Any] | None = None) -> None:
        self.platform = platform
        self.records: list[Any] = list(records or [])
        self.created: list[RecordFields] = []
        self.updates: list[tuple[str, RecordFields]] = []
        self.fetch_error: Exception | None = None
        self.failing_keys: set[str] = set()
        # Raised for failing keys instead of a TransportError when set
        self.failure_error: Exception | None = None
        self.fetch_count = 0
        self.closed = False
        self._next_id = 1000

    async def fetch_records(self) -> list[Any]:
        self.fetch_count += 1
        if self.fetch_error is not None:
            raise self.fetch_error
        return list(self.records)

    async def create_record(self, fields: RecordFields) -> str:
        key = fields[LogicalField.TITLE]
        if key in self.failing_keys:
            raise self.failure_error or TransportError(f"rejected create of {key}")
        self._next_id += 1
        remote_id = str(self._next_id)
        values = {_ATTRIBUTES[self.platform][name]: value for name, value in fields.items()}
        record_cls = TicketRecord if self.platform is Platform.HUBSPOT else BoardItem
        self.records.append(record_cls(remote_id=remote_id, **values))
        self.created.append(dict(fields))
        return remote_id

    async def update_record(self, remote_id: str, fields: RecordFields) -> None:
        for i, record in enumerate(self.records):
            if record.remote_id != remote_id:
                continue
            if record.key in self.failing_keys:
                raise self.failure_error or TransportError(f"rejected update of {record.key}")
            changes = {_ATTRIBUTES[self.platform][name]: value for name, value in fields.items()}
            self.records[i] = replace(record, **changes)
            self.updates.append((remote_id, dict(fields)))
            return
        raise TransportError(f"record {remote_id} not found")

    async def aclose(self) -> None:
        self.closed = True


def ticket(
    subject: str,
    status: str = "new",
    content: str = "",
    priority: str = "MEDIUM",
    remote_id: str | None = None,
) -> TicketRecord:
    """Build a HubSpot ticket record."""
    return TicketRecord(
        subject=subject,
        content=content,
        status=status,
        priority=priority,
        remote_id=remote_id or f"t-{subject}",
    )


def item(
    name: str,
    status: str = "New",
    content: str = "",
    priority: str = "Medium",
    remote_id: str | None = None,
) -> BoardItem:
    """Build a Monday.com board item."""
    return BoardItem(
        name=name,
        content=content,
        status=status,
        priority=priority,
        remote_id=remote_id or f"i-{name}",
    )


# Shared fixtures


@pytest.fixture
def credentials() -> Credentials:
    """Complete credentials for both platforms."""
    return Credentials(
        hubspot_token="pat-na1-test-token",
        monday_token="monday-test-token",
        monday_board_id="1234567890",
    )


@pytest.fixture
def store(credentials: Credentials) -> SyncStateStore:
    """A state store with credentials, sync enabled and the default policy."""
    return SyncStateStore(credentials=credentials, sync_enabled=True)


@pytest.fixture
def hubspot_source() -> InMemorySource:
    """Empty in-memory HubSpot."""
    return InMemorySource(Platform.HUBSPOT)


@pytest.fixture
def monday_source() -> InMemorySource:
    """Empty in-memory Monday.com board."""
    return InMemorySource(Platform.MONDAY)


@pytest.fixture
def connect(hubspot_source: InMemorySource, monday_source: InMemorySource):
    """Platform factory returning the in-memory sources."""

    def factory(_credentials: Credentials) -> dict[Platform, InMemorySource]:
        return {Platform.HUBSPOT: hubspot_source, Platform.MONDAY: monday_source}

    return factory
