"""Reconciler - Computes and applies one-direction sync passes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from boardsync.logging import log_event
from boardsync.reconciler.models import (
    CreateAction,
    OutcomeStatus,
    PlanAction,
    RecordOutcome,
    SkipAction,
    SyncPassResult,
    SyncPlan,
)
from boardsync.reconciler.planner import compute_plan
from boardsync.records.exceptions import PartialApplyError, SyncError, TransportError
from boardsync.records.models import Platform
from boardsync.state_store import LogSeverity

if TYPE_CHECKING:
    from boardsync.records.models import Direction
    from boardsync.records.protocols import RecordSource
    from boardsync.state_store import SyncStateStore

logger = logging.getLogger(__name__)

_RECORD_NOUNS = {
    Platform.HUBSPOT: "HubSpot ticket",
    Platform.MONDAY: "Monday.com item",
}


class Reconciler:
    """Runs one-direction reconciliation passes.

    A pass fetches both snapshots, computes a plan with the current field
    policy and applies it through the target platform. Per-record failures are
    logged and counted without stopping the pass; a failure to fetch either
    snapshot aborts the pass.
    """

    def __init__(self, store: SyncStateStore) -> None:
        """Initialize the Reconciler.

        Args:
            store: State store providing the field policy and the log buffer.
        """
        self.store = store

    async def reconcile(
        self,
        direction: Direction,
        source: RecordSource,
        target: RecordSource,
    ) -> SyncPassResult:
        """Run one full pass from `source` to `target`.

        Args:
            direction: Direction of the pass; must match the two platforms.
            source: Collaborator for the source platform.
            target: Collaborator for the target platform.

        Returns:
            SyncPassResult with per-record outcomes, or with `error` set if a
            snapshot could not be fetched.
        """
        self._log(f"Starting {direction.label} sync...")

        try:
            source_records = await source.fetch_records()
            target_records = await target.fetch_records()
        except Exception as e:
            if not isinstance(e, TransportError):
                logger.debug("Unexpected error fetching snapshots", exc_info=True)
            message = f"{direction.label} sync failed: {e}"
            self._log(message, LogSeverity.ERROR)
            return SyncPassResult(direction=direction, error=message)

        plan = compute_plan(direction, source_records, target_records, self.store.get_policy())
        result = await self.apply(plan, target)

        summary = (
            f"{direction.label} sync complete: "
            f"{result.created} created, {result.updated} updated"
        )
        if result.failed:
            summary += f", {result.failed} failed"
        self._log(summary, LogSeverity.SUCCESS)
        return result

    async def apply(self, plan: SyncPlan, target: RecordSource) -> SyncPassResult:
        """Apply every action of a plan, one at a time, in order.

        Args:
            plan: Plan computed for this pass.
            target: Collaborator for the target platform.

        Returns:
            SyncPassResult with one outcome per action.
        """
        result = SyncPassResult(direction=plan.direction)
        for action in plan.actions:
            result.outcomes.append(await self._apply_action(action, target))
        return result

    async def _apply_action(self, action: PlanAction, target: RecordSource) -> RecordOutcome:
        noun = _RECORD_NOUNS[target.platform]

        if isinstance(action, SkipAction):
            logger.debug("Skipped %s: %s (no fields to sync)", noun, action.key)
            return RecordOutcome(
                key=action.key, status=OutcomeStatus.SKIPPED, remote_id=action.remote_id
            )

        creating = isinstance(action, CreateAction)
        operation = "create" if creating else "update"
        try:
            if isinstance(action, CreateAction):
                remote_id = await target.create_record(action.fields)
            else:
                await target.update_record(action.remote_id, action.fields)
                remote_id = action.remote_id
        except Exception as e:
            if not isinstance(e, SyncError):
                logger.debug("Unexpected error applying %s", action.key, exc_info=True)
            failure = PartialApplyError(f"{noun} {operation}", action.key, e)
            self._log(str(failure), LogSeverity.ERROR)
            return RecordOutcome(
                key=action.key,
                status=OutcomeStatus.FAILED,
                fields=list(action.fields),
                remote_id=None if isinstance(action, CreateAction) else action.remote_id,
                error=str(e),
            )

        if creating:
            self._log(f"Created {noun}: {action.key}", LogSeverity.SUCCESS)
            status = OutcomeStatus.CREATED
        else:
            self._log(f"Updated {noun}: {action.key} ({', '.join(action.fields)})")
            status = OutcomeStatus.UPDATED
        return RecordOutcome(
            key=action.key,
            status=status,
            fields=list(action.fields),
            remote_id=remote_id,
        )

    def _log(self, message: str, severity: LogSeverity = LogSeverity.INFO) -> None:
        log_event(logger, self.store, message, severity)
