"""Custom exceptions for the Monday.com adapter."""

from boardsync.records.exceptions import TransportError


class MondayError(TransportError):
    """Monday.com GraphQL request failed or returned errors."""
