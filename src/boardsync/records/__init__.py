"""Records - Shared types, errors and the collaborator protocol."""

from boardsync.records.exceptions import (
    ConfigurationError,
    PartialApplyError,
    SyncError,
    TransportError,
)
from boardsync.records.models import (
    FULL_PASS,
    BoardItem,
    Direction,
    FieldOwner,
    LogicalField,
    Platform,
    RecordFields,
    SyncRecord,
    TicketRecord,
)
from boardsync.records.protocols import RecordSource

__all__ = [
    "FULL_PASS",
    "BoardItem",
    "ConfigurationError",
    "Direction",
    "FieldOwner",
    "LogicalField",
    "PartialApplyError",
    "Platform",
    "RecordFields",
    "RecordSource",
    "SyncError",
    "SyncRecord",
    "TicketRecord",
    "TransportError",
]
