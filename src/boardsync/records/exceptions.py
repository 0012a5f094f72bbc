"""Error taxonomy shared by the platform clients, reconciler and orchestrator."""


class SyncError(Exception):
    """Base exception for BoardSync errors."""


class TransportError(SyncError):
    """Remote platform unreachable, rejected the credentials or returned an error."""


class ConfigurationError(SyncError):
    """Credentials, board id or field policy missing or invalid."""


class PartialApplyError(SyncError):
    """A single create or update was rejected by the target platform."""

    def __init__(self, operation: str, key: str, cause: Exception) -> None:
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__(f"{operation} failed for '{key}': {cause}")
