"""Data models shared across BoardSync components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class Platform(StrEnum):
    """The two record stores kept in sync."""

    HUBSPOT = "hubspot"
    MONDAY = "monday"

    @property
    def label(self) -> str:
        return _PLATFORM_LABELS[self]


_PLATFORM_LABELS = {
    Platform.HUBSPOT: "HubSpot",
    Platform.MONDAY: "Monday.com",
}


class Direction(StrEnum):
    """Direction of a one-way reconciliation pass."""

    HUBSPOT_TO_MONDAY = "hubspot_to_monday"
    MONDAY_TO_HUBSPOT = "monday_to_hubspot"

    @property
    def source(self) -> Platform:
        if self is Direction.HUBSPOT_TO_MONDAY:
            return Platform.HUBSPOT
        return Platform.MONDAY

    @property
    def target(self) -> Platform:
        if self is Direction.HUBSPOT_TO_MONDAY:
            return Platform.MONDAY
        return Platform.HUBSPOT

    @property
    def label(self) -> str:
        return f"{self.source.label} → {self.target.label}"

    @classmethod
    def from_source(cls, platform: Platform) -> Direction:
        """Direction whose source is the given platform."""
        if platform is Platform.HUBSPOT:
            return cls.HUBSPOT_TO_MONDAY
        return cls.MONDAY_TO_HUBSPOT


# A full pass always runs HubSpot → Monday first, then Monday → HubSpot.
FULL_PASS: tuple[Direction, ...] = (
    Direction.HUBSPOT_TO_MONDAY,
    Direction.MONDAY_TO_HUBSPOT,
)


class LogicalField(StrEnum):
    """Platform-independent field names governed by the field policy."""

    TITLE = "title"
    DESCRIPTION = "description"
    STATUS = "status"
    PRIORITY = "priority"


class FieldOwner(StrEnum):
    """Which platform is the source of truth for a field."""

    HUBSPOT = "hubspot"
    MONDAY = "monday"
    BOTH = "both"


RecordFields = dict[LogicalField, str]


class SyncRecord(Protocol):
    """A record as seen by the reconciler."""

    remote_id: str

    @property
    def key(self) -> str: ...

    def fields(self) -> RecordFields: ...


@dataclass
class TicketRecord:
    """A HubSpot ticket."""

    subject: str
    content: str
    status: str
    priority: str
    remote_id: str

    @property
    def key(self) -> str:
        return self.subject

    def fields(self) -> RecordFields:
        return {
            LogicalField.TITLE: self.subject,
            LogicalField.DESCRIPTION: self.content,
            LogicalField.STATUS: self.status,
            LogicalField.PRIORITY: self.priority,
        }


@dataclass
class BoardItem:
    """A Monday.com board item."""

    name: str
    content: str
    status: str
    priority: str
    remote_id: str

    @property
    def key(self) -> str:
        return self.name

    def fields(self) -> RecordFields:
        return {
            LogicalField.TITLE: self.name,
            LogicalField.DESCRIPTION: self.content,
            LogicalField.STATUS: self.status,
            LogicalField.PRIORITY: self.priority,
        }
