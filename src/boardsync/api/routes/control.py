"""Control endpoints for the sync orchestrator."""

import logging

from fastapi import APIRouter, Query

from boardsync.api.dependencies import OrchestratorDep, StateStoreDep
from boardsync.api.models import (
    APIResponse,
    ManualSyncResponse,
    MessageResponse,
    StatusResponse,
    status_to_response,
    sync_pass_to_response,
)
from boardsync.logging import log_event
from boardsync.orchestrator import Trigger
from boardsync.state_store import LogSeverity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["control"])


@router.get("/status", response_model=APIResponse[StatusResponse])
def get_status(orchestrator: OrchestratorDep) -> APIResponse[StatusResponse]:
    """Get sync status."""
    return APIResponse(data=status_to_response(orchestrator.get_status()))


@router.post("/sync/enable", response_model=APIResponse[MessageResponse])
def enable_sync(store: StateStoreDep) -> APIResponse[MessageResponse]:
    """Enable automatic sync. Fails with 400 if credentials are incomplete."""
    store.enable_sync()
    log_event(logger, store, "Auto-sync enabled", LogSeverity.SUCCESS)
    return APIResponse(data=MessageResponse(message="Auto-sync enabled"))


@router.post("/sync/disable", response_model=APIResponse[MessageResponse])
def disable_sync(store: StateStoreDep) -> APIResponse[MessageResponse]:
    """Disable automatic sync."""
    store.disable_sync()
    log_event(logger, store, "Auto-sync disabled")
    return APIResponse(data=MessageResponse(message="Auto-sync disabled"))


@router.post("/sync", response_model=APIResponse[ManualSyncResponse])
async def trigger_sync(
    store: StateStoreDep,
    orchestrator: OrchestratorDep,
    wait: bool = Query(default=False, description="Wait for the pass and return its results"),
) -> APIResponse[ManualSyncResponse]:
    """Trigger a full HubSpot ↔ Monday.com pass."""
    if not store.is_sync_enabled():
        return APIResponse(data=ManualSyncResponse(message="Sync disabled"))

    log_event(logger, store, "Manual sync triggered")

    if not wait:
        orchestrator.trigger_pass(trigger=Trigger.MANUAL)
        return APIResponse(data=ManualSyncResponse(message="Sync triggered"))

    result = await orchestrator.run_pass(trigger=Trigger.MANUAL)
    if result is None:
        return APIResponse(data=ManualSyncResponse(message="Sync queued behind running pass"))
    return APIResponse(
        data=ManualSyncResponse(
            message="Sync complete",
            results=[sync_pass_to_response(r) for r in result.results],
        )
    )
