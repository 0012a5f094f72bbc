"""SyncOrchestrator - Sequences bidirectional passes and guards re-entrancy."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine, Iterable
from typing import TYPE_CHECKING, Any

from boardsync.logging import log_event
from boardsync.orchestrator.debounce import Debouncer
from boardsync.orchestrator.models import (
    FullPassResult,
    OrchestratorState,
    OrchestratorStatus,
    Trigger,
)
from boardsync.orchestrator.platforms import PlatformFactory, connect_platforms
from boardsync.reconciler import Reconciler
from boardsync.records.exceptions import SyncError
from boardsync.records.models import FULL_PASS, Direction, Platform
from boardsync.state_store import LogSeverity

if TYPE_CHECKING:
    from boardsync.reconciler import SyncPassResult
    from boardsync.state_store import Credentials, SyncStateStore

logger = logging.getLogger(__name__)

DEFAULT_SYNC_INTERVAL = 300.0  # seconds
DEFAULT_WEBHOOK_DELAY = 1.0  # seconds


class SyncOrchestrator:
    """Runs full HubSpot ↔ Monday.com passes.

    A full pass runs HubSpot → Monday.com to completion, then Monday.com →
    HubSpot. Only one pass runs at a time: a request that arrives while a
    pass is in flight is folded into a single follow-up that runs as soon as
    the current one finishes. Every entry point is a no-op while sync is
    disabled.

    Entry points:
    - run_periodic(): timer loop
    - notify_change(): webhook notification, debounced per direction
    - trigger_pass() / run_pass(): manual trigger
    """

    def __init__(
        self,
        store: SyncStateStore,
        connect: PlatformFactory = connect_platforms,
        webhook_delay: float = DEFAULT_WEBHOOK_DELAY,
    ) -> None:
        """Initialize the SyncOrchestrator.

        Args:
            store: State store with policy, credentials and enabled flag.
            connect: Builds the platform collaborators from credentials.
            webhook_delay: Debounce delay for webhook-triggered passes, in seconds.
        """
        self.store = store
        self.reconciler = Reconciler(store)
        self._connect = connect
        self._debouncer: Debouncer[Direction] = Debouncer(webhook_delay)
        self._state = OrchestratorState.IDLE
        self._queued: set[Direction] = set()
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def state(self) -> OrchestratorState:
        return self._state

    def get_status(self) -> OrchestratorStatus:
        """Get the current orchestrator status."""
        return OrchestratorStatus(
            state=self._state,
            sync_enabled=self.store.is_sync_enabled(),
            last_sync=self.store.last_sync,
            queued=[d for d in FULL_PASS if d in self._queued],
            debounced=[d for d in FULL_PASS if d in self._debouncer.pending()],
        )

    async def run_pass(
        self,
        directions: Iterable[Direction] = FULL_PASS,
        trigger: Trigger = Trigger.MANUAL,
    ) -> FullPassResult | None:
        """Run the requested directions, or queue them behind the running pass.

        Args:
            directions: Directions to run; always executed in full-pass order.
            trigger: What started the pass.

        Returns:
            FullPassResult for the directions run by this call, or None when
            sync is disabled or the request was queued behind a running pass.

        Raises:
            ConfigurationError: If credentials are incomplete.
        """
        if not self.store.is_sync_enabled():
            logger.debug("Sync disabled, ignoring %s trigger", trigger)
            return None

        self.store.require_credentials()
        self._queued.update(directions)

        if self._state is OrchestratorState.RUNNING:
            logger.info(
                "Sync already running, queued follow-up: %s",
                ", ".join(d for d in FULL_PASS if d in self._queued),
            )
            return None

        self._state = OrchestratorState.RUNNING
        result = FullPassResult(trigger=trigger)
        try:
            while self._queued and self.store.is_sync_enabled():
                credentials = self.store.require_credentials()
                batch = [d for d in FULL_PASS if d in self._queued]
                self._queued.clear()
                result.results.extend(await self._run_batch(batch, credentials))
        finally:
            self._queued.clear()
            self._state = OrchestratorState.IDLE

        return result

    async def _run_batch(
        self, batch: list[Direction], credentials: Credentials
    ) -> list[SyncPassResult]:
        platforms = self._connect(credentials)
        results: list[SyncPassResult] = []
        try:
            for direction in batch:
                pass_result = await self.reconciler.reconcile(
                    direction,
                    source=platforms[direction.source],
                    target=platforms[direction.target],
                )
                if pass_result.ok:
                    self.store.mark_synced()
                results.append(pass_result)
        finally:
            for platform in platforms.values():
                await platform.aclose()
        return results

    def trigger_pass(
        self,
        directions: Iterable[Direction] = FULL_PASS,
        trigger: Trigger = Trigger.MANUAL,
    ) -> bool:
        """Start a pass in the background.

        Must be called from within the running event loop.

        Returns:
            False if sync is disabled, True once the pass is scheduled.

        Raises:
            ConfigurationError: If credentials are incomplete.
        """
        if not self.store.is_sync_enabled():
            return False
        self.store.require_credentials()
        self._spawn(self.run_pass(tuple(directions), trigger))
        return True

    def notify_change(self, platform: Platform) -> bool:
        """Handle a change notification from a platform.

        Schedules the direction whose source is `platform` after the webhook
        delay. A second notification within the delay restarts it.

        Returns:
            False if sync is disabled, True once the pass is scheduled.
        """
        if not self.store.is_sync_enabled():
            return False

        direction = Direction.from_source(platform)
        self._log(f"{platform.label} webhook received")
        if self._debouncer.schedule(direction, lambda: self._spawn(self._run_debounced(direction))):
            logger.debug("Rescheduled debounced %s pass", direction)
        return True

    async def _run_debounced(self, direction: Direction) -> FullPassResult | None:
        return await self.run_pass((direction,), Trigger.WEBHOOK)

    async def run_periodic(self, interval: float = DEFAULT_SYNC_INTERVAL) -> None:
        """Run a full pass every `interval` seconds while sync is enabled.

        Runs until cancelled.
        """
        logger.info("Scheduled sync every %.0f seconds", interval)
        while True:
            await asyncio.sleep(interval)
            if not self.store.is_sync_enabled():
                continue
            self._log("Scheduled sync starting...")
            await self._guarded(self.run_pass(FULL_PASS, Trigger.SCHEDULE))

    async def wait_idle(self) -> None:
        """Wait for every background pass started so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def aclose(self) -> None:
        """Drop pending webhook triggers and wait for in-flight passes."""
        self._debouncer.cancel_all()
        await self.wait_idle()

    def _spawn(self, coro: Coroutine[Any, Any, FullPassResult | None]) -> None:
        task = asyncio.get_running_loop().create_task(self._guarded(coro))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _guarded(
        self, coro: Coroutine[Any, Any, FullPassResult | None]
    ) -> FullPassResult | None:
        try:
            return await coro
        except SyncError as e:
            self._log(f"Sync failed: {e}", LogSeverity.ERROR)
            return None
        except Exception as e:
            logger.debug("Unexpected error during sync", exc_info=True)
            self._log(f"Sync failed: {e}", LogSeverity.ERROR)
            return None

    def _log(self, message: str, severity: LogSeverity = LogSeverity.INFO) -> None:
        log_event(logger, self.store, message, severity)
