"""Data models for the Orchestrator module."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003
from enum import StrEnum

from boardsync.reconciler.models import SyncPassResult  # noqa: TC001
from boardsync.records.models import Direction  # noqa: TC001


class OrchestratorState(StrEnum):
    """Whether a pass is in flight."""

    IDLE = "idle"
    RUNNING = "running"


class Trigger(StrEnum):
    """What started a pass."""

    SCHEDULE = "schedule"
    WEBHOOK = "webhook"
    MANUAL = "manual"


@dataclass
class FullPassResult:
    """Results of every direction run by one call to the orchestrator.

    Attributes:
        trigger: What started the pass.
        results: One result per direction run, in execution order. Includes
                 follow-up directions coalesced while the pass was running.
    """

    trigger: Trigger
    results: list[SyncPassResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(r.ok for r in self.results)


@dataclass
class OrchestratorStatus:
    """Snapshot of the orchestrator for the administrative surface.

    Attributes:
        state: IDLE or RUNNING.
        sync_enabled: Global enabled flag.
        last_sync: Completion time of the last successful direction pass.
        queued: Directions waiting to run after the in-flight pass.
        debounced: Directions with a webhook trigger waiting out the delay.
    """

    state: OrchestratorState
    sync_enabled: bool
    last_sync: datetime | None
    queued: list[Direction] = field(default_factory=list)
    debounced: list[Direction] = field(default_factory=list)
