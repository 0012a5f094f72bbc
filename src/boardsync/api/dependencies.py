"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from boardsync.orchestrator import SyncOrchestrator
from boardsync.state_store import SyncStateStore

# Global SyncStateStore instance (initialized on app startup)
_state_store: SyncStateStore | None = None


def init_state_store(store: SyncStateStore) -> SyncStateStore:
    """Initialize the global SyncStateStore instance."""
    global _state_store  # noqa: PLW0603
    _state_store = store
    return _state_store


def close_state_store() -> None:
    """Release the global SyncStateStore instance."""
    global _state_store  # noqa: PLW0603
    _state_store = None


def get_state_store() -> Generator[SyncStateStore, None, None]:
    """Dependency that provides the SyncStateStore instance."""
    if _state_store is None:
        raise RuntimeError("SyncStateStore not initialized. Call init_state_store() first.")
    yield _state_store


# Type alias for dependency injection
StateStoreDep = Annotated[SyncStateStore, Depends(get_state_store)]

# Global SyncOrchestrator instance (initialized on app startup)
_orchestrator: SyncOrchestrator | None = None


def init_orchestrator(orchestrator: SyncOrchestrator) -> None:
    """Initialize the global SyncOrchestrator instance."""
    global _orchestrator  # noqa: PLW0603
    _orchestrator = orchestrator


def close_orchestrator() -> None:
    """Release the global SyncOrchestrator instance."""
    global _orchestrator  # noqa: PLW0603
    _orchestrator = None


def get_orchestrator() -> Generator[SyncOrchestrator, None, None]:
    """Dependency that provides the SyncOrchestrator instance."""
    if _orchestrator is None:
        raise RuntimeError("SyncOrchestrator not initialized. Call init_orchestrator() first.")
    yield _orchestrator


# Type alias for dependency injection
OrchestratorDep = Annotated[SyncOrchestrator, Depends(get_orchestrator)]
