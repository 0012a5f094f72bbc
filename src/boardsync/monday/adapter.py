"""MondayAdapter - Lists, creates and updates items on a Monday.com board."""

from __future__ import annotations

import json
from typing import Any

import httpx

from boardsync.logging import get_logger
from boardsync.monday.exceptions import MondayError
from boardsync.records.models import BoardItem, LogicalField, Platform, RecordFields

logger = get_logger("monday")

MONDAY_API_URL = "https://api.monday.com/v2"

# Logical field name -> board column id. The title is the item name itself.
COLUMNS = {
    LogicalField.DESCRIPTION: "text",
    LogicalField.STATUS: "status",
    LogicalField.PRIORITY: "priority",
}

# Values used when creating an item without them
CREATE_DEFAULTS = {
    LogicalField.DESCRIPTION: "",
    LogicalField.STATUS: "New",
    LogicalField.PRIORITY: "Medium",
}

# Values reported for items whose column is blank
FETCH_DEFAULTS = {
    LogicalField.DESCRIPTION: "",
    LogicalField.STATUS: "new",
    LogicalField.PRIORITY: "MEDIUM",
}

_ITEMS_QUERY = """
query ($boardId: ID!) {
    boards(ids: [$boardId]) {
        items_page {
            items {
                id
                name
                column_values {
                    id
                    text
                    value
                }
            }
        }
    }
}
"""

_CREATE_MUTATION = """
mutation ($boardId: ID!, $itemName: String!, $columnValues: JSON!) {
    create_item(board_id: $boardId, item_name: $itemName, column_values: $columnValues) {
        id
    }
}
"""

_UPDATE_MUTATION = """
mutation ($boardId: ID!, $itemId: ID!, $columnValues: JSON!) {
    change_multiple_column_values(
        board_id: $boardId, item_id: $itemId, column_values: $columnValues
    ) {
        id
    }
}
"""


class MondayAdapter:
    """Adapter for a Monday.com board.

    Uses the Monday.com GraphQL API (v2).
    """

    platform = Platform.MONDAY

    def __init__(
        self,
        token: str,
        board_id: str,
        base_url: str = MONDAY_API_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Monday Adapter.

        Args:
            token: Monday.com API token
            board_id: Board ID (visible in the board URL)
            base_url: Monday GraphQL API URL (for testing)
            timeout: Per-request timeout in seconds
        """
        self.token = token
        self.board_id = board_id
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for GraphQL API."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": self.token,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            query: GraphQL query string
            variables: Query variables

        Returns:
            Response data

        Raises:
            MondayError: If the request fails, the body is not JSON or the
                response carries errors
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            response = await self.client.post(self.base_url, json=payload)
        except httpx.HTTPError as e:
            raise MondayError(f"Monday.com API error: {e}") from e

        if response.status_code != 200:
            raise MondayError(
                f"Monday.com API error: {response.status_code} - {response.text}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise MondayError("Monday.com API error: response is not JSON") from e
        if not isinstance(data, dict):
            raise MondayError("Monday.com API error: unexpected response body")

        if data.get("errors"):
            raise MondayError(f"Monday.com API error: {data['errors'][0].get('message')}")
        if not isinstance(data.get("data"), dict):
            raise MondayError("Monday.com API error: response has no data")

        return dict(data["data"])

    async def fetch_records(self) -> list[BoardItem]:
        """Get all items on the board.

        Returns:
            Items in the order Monday.com lists them
        """
        data = await self._graphql(_ITEMS_QUERY, {"boardId": self.board_id})

        records = []
        try:
            boards = data.get("boards") or []
            if not boards:
                return []
            items = (boards[0].get("items_page") or {}).get("items") or []

            for item in items:
                columns = {col["id"]: col.get("text") for col in item.get("column_values") or []}
                values = {
                    name: columns.get(column_id) or FETCH_DEFAULTS[name]
                    for name, column_id in COLUMNS.items()
                }
                records.append(
                    BoardItem(
                        name=item["name"],
                        content=values[LogicalField.DESCRIPTION],
                        status=values[LogicalField.STATUS],
                        priority=values[LogicalField.PRIORITY],
                        remote_id=str(item["id"]),
                    )
                )
        except (AttributeError, KeyError, TypeError) as e:
            raise MondayError(f"Malformed Monday.com item list: {e!r}") from e

        logger.debug("Fetched %d Monday.com item(s) from board %s", len(records), self.board_id)
        return records

    async def create_record(self, fields: RecordFields) -> str:
        """Create an item seeded with every logical field.

        Args:
            fields: Logical field values; blank columns use board defaults

        Returns:
            The new item's ID
        """
        column_values = {
            column_id: fields.get(name) or CREATE_DEFAULTS[name]
            for name, column_id in COLUMNS.items()
        }
        data = await self._graphql(
            _CREATE_MUTATION,
            {
                "boardId": self.board_id,
                "itemName": fields.get(LogicalField.TITLE, ""),
                "columnValues": json.dumps(column_values),
            },
        )
        try:
            return str(data["create_item"]["id"])
        except (KeyError, TypeError) as e:
            raise MondayError("Monday.com API error: create_item returned no id") from e

    async def update_record(self, remote_id: str, fields: RecordFields) -> None:
        """Change only the given fields of an item.

        Args:
            remote_id: Monday.com item ID
            fields: Logical fields to change; absent columns are left untouched
        """
        column_values: dict[str, str] = {}
        for name, value in fields.items():
            if name == LogicalField.TITLE:
                column_values["name"] = value
            else:
                column_values[COLUMNS[name]] = value

        await self._graphql(
            _UPDATE_MUTATION,
            {
                "boardId": self.board_id,
                "itemId": remote_id,
                "columnValues": json.dumps(column_values),
            },
        )
