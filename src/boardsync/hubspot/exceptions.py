"""Custom exceptions for the HubSpot adapter."""

from boardsync.records.exceptions import TransportError


class HubSpotError(TransportError):
    """HubSpot CRM API request failed."""
