"""State Store - In-memory sync configuration, policy and log buffer."""

from boardsync.state_store.models import (
    DEFAULT_POLICY,
    Credentials,
    FieldPolicy,
    LogEntry,
    LogSeverity,
)
from boardsync.state_store.store import DEFAULT_LOG_CAPACITY, SyncStateStore

__all__ = [
    "DEFAULT_LOG_CAPACITY",
    "DEFAULT_POLICY",
    "Credentials",
    "FieldPolicy",
    "LogEntry",
    "LogSeverity",
    "SyncStateStore",
]
