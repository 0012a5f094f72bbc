"""Sync log endpoint."""

from fastapi import APIRouter

from boardsync.api.dependencies import StateStoreDep
from boardsync.api.models import APIResponse, LogEntryResponse, log_entry_to_response

router = APIRouter(tags=["logs"])


@router.get("/logs", response_model=APIResponse[list[LogEntryResponse]])
def list_logs(store: StateStoreDep) -> APIResponse[list[LogEntryResponse]]:
    """List recent sync log entries, most recent first."""
    return APIResponse(data=[log_entry_to_response(e) for e in store.get_logs()])
