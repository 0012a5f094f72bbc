"""Data models for the State Store."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from boardsync.records.exceptions import ConfigurationError
from boardsync.records.models import FieldOwner, LogicalField


class LogSeverity(StrEnum):
    """Severity of a dashboard log entry."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class LogEntry:
    """One line of the dashboard sync log."""

    message: str
    severity: LogSeverity = LogSeverity.INFO
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class FieldPolicy:
    """Source of truth for each logical field.

    Attributes:
        title: Owner of the ticket subject / item name.
        description: Owner of the ticket content / text column.
        status: Owner of the pipeline stage / status column.
        priority: Owner of the ticket priority / priority column.
    """

    title: FieldOwner = FieldOwner.HUBSPOT
    description: FieldOwner = FieldOwner.HUBSPOT
    status: FieldOwner = FieldOwner.MONDAY
    priority: FieldOwner = FieldOwner.MONDAY

    def owner(self, name: LogicalField) -> FieldOwner:
        """Get the owner of a logical field."""
        return FieldOwner(getattr(self, LogicalField(name).value))

    def as_dict(self) -> dict[str, str]:
        return {f.name: str(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FieldPolicy:
        """Build a policy from plain values, defaulting omitted fields.

        Raises:
            ConfigurationError: If a field name or owner value is unknown.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown policy fields: {', '.join(sorted(unknown))}")

        values: dict[str, FieldOwner] = {}
        for name, value in data.items():
            try:
                values[name] = FieldOwner(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid owner '{value}' for field '{name}'. "
                    f"Expected one of: {', '.join(o.value for o in FieldOwner)}"
                ) from e
        return cls(**values)


DEFAULT_POLICY = FieldPolicy()


@dataclass(frozen=True)
class Credentials:
    """Platform credentials held in process memory."""

    hubspot_token: str = ""
    monday_token: str = ""
    monday_board_id: str = ""

    def missing(self) -> list[str]:
        """Names of the credentials that are empty."""
        return [f.name for f in fields(self) if not getattr(self, f.name).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing()
