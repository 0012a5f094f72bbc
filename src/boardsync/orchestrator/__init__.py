"""Orchestrator package - Pass sequencing, re-entrancy guard and triggers."""

from boardsync.orchestrator.debounce import Debouncer
from boardsync.orchestrator.models import (
    FullPassResult,
    OrchestratorState,
    OrchestratorStatus,
    Trigger,
)
from boardsync.orchestrator.orchestrator import (
    DEFAULT_SYNC_INTERVAL,
    DEFAULT_WEBHOOK_DELAY,
    SyncOrchestrator,
)
from boardsync.orchestrator.platforms import PlatformFactory, connect_platforms

__all__ = [
    "DEFAULT_SYNC_INTERVAL",
    "DEFAULT_WEBHOOK_DELAY",
    "Debouncer",
    "FullPassResult",
    "OrchestratorState",
    "OrchestratorStatus",
    "PlatformFactory",
    "SyncOrchestrator",
    "Trigger",
    "connect_platforms",
]
