"""HubSpotAdapter - Lists, creates and patches HubSpot tickets."""

from __future__ import annotations

from typing import Any

import httpx

from boardsync.hubspot.exceptions import HubSpotError
from boardsync.logging import get_logger
from boardsync.records.models import LogicalField, Platform, RecordFields, TicketRecord

logger = get_logger("hubspot")

HUBSPOT_API_URL = "https://api.hubapi.com"
TICKETS_PATH = "/crm/v3/objects/tickets"

# Logical field name -> HubSpot ticket property
PROPERTIES = {
    LogicalField.TITLE: "subject",
    LogicalField.DESCRIPTION: "content",
    LogicalField.STATUS: "hs_pipeline_stage",
    LogicalField.PRIORITY: "hs_ticket_priority",
}

DEFAULT_STATUS = "new"
DEFAULT_PRIORITY = "MEDIUM"
PAGE_LIMIT = 100


class HubSpotAdapter:
    """Adapter for HubSpot CRM tickets.

    Uses the CRM v3 objects REST API with a private app access token.
    """

    platform = Platform.HUBSPOT

    def __init__(
        self,
        token: str,
        base_url: str = HUBSPOT_API_URL,
        timeout: float = 30.0,
    ) -> None:
        """Initialize HubSpot Adapter.

        Args:
            token: HubSpot private app access token
            base_url: HubSpot API base URL (for testing)
            timeout: Per-request timeout in seconds
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client for the CRM API."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
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

    @staticmethod
    def _parse(response: httpx.Response, action: str) -> dict[str, Any]:
        """Validate a CRM response and return its JSON body.

        Raises:
            HubSpotError: If the API answered with an error status or the body
                is not a JSON object
        """
        if response.status_code >= 400:
            raise HubSpotError(
                f"Error {action}: {response.status_code} - {response.text}"
            )
        try:
            data = response.json()
        except ValueError as e:
            raise HubSpotError(f"Error {action}: response is not JSON") from e
        if not isinstance(data, dict):
            raise HubSpotError(f"Error {action}: unexpected response body")
        return data

    async def fetch_records(self) -> list[TicketRecord]:
        """Get all tickets with the synced properties.

        Returns:
            Tickets in the order HubSpot lists them
        """
        properties = [*PROPERTIES.values(), "hubspot_owner_id"]
        try:
            response = await self.client.get(
                TICKETS_PATH,
                params={"properties": ",".join(properties), "limit": PAGE_LIMIT},
            )
        except httpx.HTTPError as e:
            raise HubSpotError(f"Error fetching HubSpot tickets: {e}") from e

        data = self._parse(response, "fetching HubSpot tickets")
        tickets = []
        try:
            for result in data.get("results") or []:
                props = result.get("properties") or {}
                tickets.append(
                    TicketRecord(
                        subject=props.get("subject") or "",
                        content=props.get("content") or "",
                        status=props.get("hs_pipeline_stage") or "",
                        priority=props.get("hs_ticket_priority") or "",
                        remote_id=str(result["id"]),
                    )
                )
        except (AttributeError, KeyError, TypeError) as e:
            raise HubSpotError(f"Malformed HubSpot ticket list: {e!r}") from e

        logger.debug("Fetched %d HubSpot ticket(s)", len(tickets))
        return tickets

    async def create_record(self, fields: RecordFields) -> str:
        """Create a ticket seeded with every logical field.

        Args:
            fields: Logical field values; empty status/priority use HubSpot defaults

        Returns:
            The new ticket's ID
        """
        properties = {
            "subject": fields.get(LogicalField.TITLE, ""),
            "content": fields.get(LogicalField.DESCRIPTION) or "",
            "hs_pipeline_stage": fields.get(LogicalField.STATUS) or DEFAULT_STATUS,
            "hs_ticket_priority": fields.get(LogicalField.PRIORITY) or DEFAULT_PRIORITY,
        }
        try:
            response = await self.client.post(TICKETS_PATH, json={"properties": properties})
        except httpx.HTTPError as e:
            raise HubSpotError(f"Error creating HubSpot ticket: {e}") from e

        data = self._parse(response, "creating HubSpot ticket")
        if "id" not in data:
            raise HubSpotError("Error creating HubSpot ticket: response has no ticket id")
        return str(data["id"])

    async def update_record(self, remote_id: str, fields: RecordFields) -> None:
        """Patch only the given fields of a ticket.

        Args:
            remote_id: HubSpot ticket ID
            fields: Logical fields to change; absent fields are left untouched
        """
        properties = {PROPERTIES[name]: value for name, value in fields.items()}
        try:
            response = await self.client.patch(
                f"{TICKETS_PATH}/{remote_id}", json={"properties": properties}
            )
        except httpx.HTTPError as e:
            raise HubSpotError(f"Error updating HubSpot ticket: {e}") from e

        self._parse(response, "updating HubSpot ticket")
