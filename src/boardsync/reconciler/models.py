"""Data models for the Reconciler module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from boardsync.records.models import Direction, LogicalField, RecordFields


@dataclass(frozen=True)
class CreateAction:
    """Create a target record seeded with all logical fields of the source."""

    key: str
    fields: RecordFields


@dataclass(frozen=True)
class UpdateAction:
    """Push the policy-allowed fields onto an existing target record."""

    key: str
    remote_id: str
    fields: RecordFields


@dataclass(frozen=True)
class SkipAction:
    """Matched record with no field the source direction may push."""

    key: str
    remote_id: str


PlanAction = CreateAction | UpdateAction | SkipAction


@dataclass
class SyncPlan:
    """Create/update/skip decisions for one direction, before any mutation.

    Attributes:
        direction: Direction the plan was computed for.
        actions: One action per source record, in source snapshot order.
    """

    direction: Direction
    actions: list[PlanAction] = field(default_factory=list)

    @property
    def creates(self) -> list[CreateAction]:
        return [a for a in self.actions if isinstance(a, CreateAction)]

    @property
    def updates(self) -> list[UpdateAction]:
        return [a for a in self.actions if isinstance(a, UpdateAction)]

    @property
    def skips(self) -> list[SkipAction]:
        return [a for a in self.actions if isinstance(a, SkipAction)]


class OutcomeStatus(StrEnum):
    """What happened to one source record during a pass."""

    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RecordOutcome:
    """Applied result for one source record."""

    key: str
    status: OutcomeStatus
    fields: list[LogicalField] = field(default_factory=list)
    remote_id: str | None = None
    error: str | None = None


@dataclass
class SyncPassResult:
    """Summary of one direction pass.

    Attributes:
        direction: Direction of the pass.
        outcomes: Per-record outcomes in processing order.
        error: Set when the pass aborted before applying anything.
    """

    direction: Direction
    outcomes: list[RecordOutcome] = field(default_factory=list)
    error: str | None = None

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def created(self) -> int:
        return self._count(OutcomeStatus.CREATED)

    @property
    def updated(self) -> int:
        return self._count(OutcomeStatus.UPDATED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def ok(self) -> bool:
        """True when the snapshots were fetched and the plan was applied."""
        return self.error is None
