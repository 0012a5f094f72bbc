"""SyncStateStore - Process-wide sync configuration and dashboard log."""

from __future__ import annotations

import threading
from collections import deque
from datetime import UTC, datetime

from boardsync.records.exceptions import ConfigurationError
from boardsync.state_store.models import (
    DEFAULT_POLICY,
    Credentials,
    FieldPolicy,
    LogEntry,
    LogSeverity,
)

DEFAULT_LOG_CAPACITY = 50


class SyncStateStore:
    """In-memory state shared by the reconciler, orchestrator and API.

    Holds the field policy, the enabled flag, credentials, the last successful
    sync time and a bounded log buffer. A single lock serializes access since
    API handlers may run in worker threads.
    """

    def __init__(
        self,
        credentials: Credentials | None = None,
        policy: FieldPolicy = DEFAULT_POLICY,
        sync_enabled: bool = False,
        log_capacity: int = DEFAULT_LOG_CAPACITY,
    ) -> None:
        """Initialize the store.

        Args:
            credentials: Initial platform credentials.
            policy: Initial field policy.
            sync_enabled: Whether sync starts enabled. Requires complete credentials.
            log_capacity: Maximum number of log entries kept.
        """
        self._lock = threading.Lock()
        self._credentials = credentials or Credentials()
        self._policy = policy
        self._sync_enabled = False
        self._last_sync: datetime | None = None
        # Most recent entry first
        self._log: deque[LogEntry] = deque(maxlen=log_capacity)

        if sync_enabled:
            self.enable_sync()

    # --- Field policy ---

    def get_policy(self) -> FieldPolicy:
        with self._lock:
            return self._policy

    def set_policy(self, policy: FieldPolicy) -> None:
        with self._lock:
            self._policy = policy

    # --- Credentials ---

    def get_credentials(self) -> Credentials:
        with self._lock:
            return self._credentials

    def set_credentials(self, credentials: Credentials) -> None:
        with self._lock:
            self._credentials = credentials

    def require_credentials(self) -> Credentials:
        """Return the credentials, failing if any is empty.

        Raises:
            ConfigurationError: If a token or the board id is missing.
        """
        credentials = self.get_credentials()
        missing = credentials.missing()
        if missing:
            raise ConfigurationError(f"Missing configuration: {', '.join(missing)}")
        return credentials

    # --- Enabled flag ---

    def is_sync_enabled(self) -> bool:
        with self._lock:
            return self._sync_enabled

    def enable_sync(self) -> None:
        """Turn sync on.

        Raises:
            ConfigurationError: If credentials are incomplete.
        """
        self.require_credentials()
        with self._lock:
            self._sync_enabled = True

    def disable_sync(self) -> None:
        with self._lock:
            self._sync_enabled = False

    # --- Last sync ---

    @property
    def last_sync(self) -> datetime | None:
        with self._lock:
            return self._last_sync

    def mark_synced(self, at: datetime | None = None) -> None:
        with self._lock:
            self._last_sync = at or datetime.now(UTC)

    # --- Log buffer ---

    def append_log(self, message: str, severity: LogSeverity | str = LogSeverity.INFO) -> LogEntry:
        entry = LogEntry(message=message, severity=LogSeverity(severity))
        with self._lock:
            self._log.appendleft(entry)
        return entry

    def get_logs(self) -> list[LogEntry]:
        with self._lock:
            return list(self._log)
