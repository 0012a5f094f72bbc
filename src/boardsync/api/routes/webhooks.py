"""Inbound change notifications from HubSpot and Monday.com."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from boardsync.api.dependencies import OrchestratorDep
from boardsync.orchestrator import SyncOrchestrator
from boardsync.records.models import Platform

router = APIRouter(prefix="/webhook", tags=["webhooks"])


def _notify(orchestrator: SyncOrchestrator, platform: Platform) -> PlainTextResponse:
    if not orchestrator.notify_change(platform):
        return PlainTextResponse("Sync disabled")
    return PlainTextResponse("OK")


@router.post("/hubspot", response_class=PlainTextResponse)
async def hubspot_webhook(orchestrator: OrchestratorDep) -> PlainTextResponse:
    """A HubSpot ticket changed: schedule a HubSpot → Monday.com pass."""
    return _notify(orchestrator, Platform.HUBSPOT)


@router.post("/monday", response_class=PlainTextResponse)
async def monday_webhook(orchestrator: OrchestratorDep) -> PlainTextResponse:
    """A Monday.com item changed: schedule a Monday.com → HubSpot pass."""
    return _notify(orchestrator, Platform.MONDAY)
