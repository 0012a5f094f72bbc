"""Monday Adapter - Board source backed by the Monday.com GraphQL API."""

from boardsync.monday.adapter import COLUMNS, MondayAdapter
from boardsync.monday.exceptions import MondayError

__all__ = [
    "COLUMNS",
    "MondayAdapter",
    "MondayError",
]
