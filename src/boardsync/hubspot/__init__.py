"""HubSpot Adapter - Ticket source backed by the HubSpot CRM v3 API."""

from boardsync.hubspot.adapter import PROPERTIES, HubSpotAdapter
from boardsync.hubspot.exceptions import HubSpotError

__all__ = [
    "PROPERTIES",
    "HubSpotAdapter",
    "HubSpotError",
]
