"""Construction of the platform collaborators for a pass."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from boardsync.hubspot import HubSpotAdapter
from boardsync.monday import MondayAdapter
from boardsync.records.models import Platform

if TYPE_CHECKING:
    from boardsync.records.protocols import RecordSource
    from boardsync.state_store import Credentials

PlatformFactory = Callable[["Credentials"], Mapping[Platform, "RecordSource"]]


def connect_platforms(credentials: Credentials) -> dict[Platform, RecordSource]:
    """Create a HubSpot and a Monday.com adapter from the given credentials."""
    return {
        Platform.HUBSPOT: HubSpotAdapter(token=credentials.hubspot_token),
        Platform.MONDAY: MondayAdapter(
            token=credentials.monday_token,
            board_id=credentials.monday_board_id,
        ),
    }
