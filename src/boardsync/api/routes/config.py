"""Credential configuration endpoints."""

import logging

from fastapi import APIRouter

from boardsync.api.dependencies import StateStoreDep
from boardsync.api.models import APIResponse, ConfigResponse, CredentialsUpdate
from boardsync.logging import log_event
from boardsync.state_store import Credentials, SyncStateStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["config"])


def _config_response(store: SyncStateStore) -> ConfigResponse:
    credentials = store.get_credentials()
    return ConfigResponse(
        hubspot_configured=bool(credentials.hubspot_token),
        monday_configured=bool(credentials.monday_token),
        monday_board_id=credentials.monday_board_id,
    )


@router.get("/config", response_model=APIResponse[ConfigResponse])
def get_config(store: StateStoreDep) -> APIResponse[ConfigResponse]:
    """Get which credentials are configured."""
    return APIResponse(data=_config_response(store))


@router.put("/config", response_model=APIResponse[ConfigResponse])
def update_config(body: CredentialsUpdate, store: StateStoreDep) -> APIResponse[ConfigResponse]:
    """Replace the HubSpot token, Monday.com token and board ID."""
    store.set_credentials(Credentials(**body.model_dump()))
    log_event(logger, store, "Configuration updated")
    return APIResponse(data=_config_response(store))
