"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from boardsync.records.models import FieldOwner
from boardsync.state_store import FieldPolicy

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None


class MessageResponse(BaseModel):
    """Response model for simple actions."""

    message: str


# Configuration models


class CredentialsUpdate(BaseModel):
    """Request model for replacing platform credentials."""

    hubspot_token: str = Field(..., min_length=1)
    monday_token: str = Field(..., min_length=1)
    monday_board_id: str = Field(..., min_length=1, max_length=32, pattern=r"^\d+$")


class ConfigResponse(BaseModel):
    """Response model for configuration. Tokens are never echoed back."""

    hubspot_configured: bool
    monday_configured: bool
    monday_board_id: str


# Field rules models


class FieldPolicyModel(BaseModel):
    """Source of truth per logical field. Omitted fields take their defaults."""

    model_config = ConfigDict(from_attributes=True)

    title: FieldOwner = FieldOwner.HUBSPOT
    description: FieldOwner = FieldOwner.HUBSPOT
    status: FieldOwner = FieldOwner.MONDAY
    priority: FieldOwner = FieldOwner.MONDAY

    def to_policy(self) -> FieldPolicy:
        return FieldPolicy(**self.model_dump())


def policy_to_response(policy: Any) -> FieldPolicyModel:
    """Convert a FieldPolicy to FieldPolicyModel."""
    return FieldPolicyModel.model_validate(policy)


# Status and log models


class StatusResponse(BaseModel):
    """Response model for orchestrator status."""

    model_config = ConfigDict(from_attributes=True)

    state: str
    sync_enabled: bool
    last_sync: datetime | None
    queued: list[str]
    debounced: list[str]


def status_to_response(status: Any) -> StatusResponse:
    """Convert an OrchestratorStatus to StatusResponse."""
    return StatusResponse.model_validate(status)


class LogEntryResponse(BaseModel):
    """Response model for a dashboard log entry."""

    model_config = ConfigDict(from_attributes=True)

    timestamp: datetime
    message: str
    severity: str


def log_entry_to_response(entry: Any) -> LogEntryResponse:
    """Convert a LogEntry to LogEntryResponse."""
    return LogEntryResponse.model_validate(entry)


# Sync result models


class RecordOutcomeResponse(BaseModel):
    """Response model for one record's outcome in a pass."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    status: str
    fields: list[str]
    remote_id: str | None
    error: str | None


class SyncPassResponse(BaseModel):
    """Response model for one direction pass."""

    model_config = ConfigDict(from_attributes=True)

    direction: str
    ok: bool
    error: str | None
    created: int
    updated: int
    skipped: int
    failed: int
    outcomes: list[RecordOutcomeResponse]


def sync_pass_to_response(result: Any) -> SyncPassResponse:
    """Convert a SyncPassResult to SyncPassResponse."""
    return SyncPassResponse.model_validate(result)


class ManualSyncResponse(BaseModel):
    """Response model for a manual sync trigger."""

    message: str
    results: list[SyncPassResponse] | None = None
