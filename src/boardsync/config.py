"""Environment-driven settings for the BoardSync service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from boardsync.orchestrator import DEFAULT_SYNC_INTERVAL, DEFAULT_WEBHOOK_DELAY
from boardsync.records.exceptions import ConfigurationError
from boardsync.state_store import Credentials

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Service settings.

    Attributes:
        credentials: HubSpot token, Monday.com token and board id.
        sync_enabled: Whether sync starts enabled.
        sync_interval: Seconds between scheduled full passes.
        webhook_delay: Debounce delay for webhook-triggered passes, in seconds.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
    """

    credentials: Credentials = Credentials()
    sync_enabled: bool = False
    sync_interval: float = DEFAULT_SYNC_INTERVAL
    webhook_delay: float = DEFAULT_WEBHOOK_DELAY
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Load settings from environment variables.

        Variables: HUBSPOT_TOKEN, MONDAY_TOKEN, MONDAY_BOARD_ID,
        BOARDSYNC_SYNC_ENABLED, BOARDSYNC_SYNC_INTERVAL,
        BOARDSYNC_WEBHOOK_DELAY, HOST, PORT.

        Raises:
            ConfigurationError: If a numeric variable is not a valid number.
        """
        env = os.environ if environ is None else environ

        return cls(
            credentials=Credentials(
                hubspot_token=env.get("HUBSPOT_TOKEN", ""),
                monday_token=env.get("MONDAY_TOKEN", ""),
                monday_board_id=env.get("MONDAY_BOARD_ID", ""),
            ),
            sync_enabled=env.get("BOARDSYNC_SYNC_ENABLED", "").strip().lower() in _TRUE_VALUES,
            sync_interval=_positive_float(env, "BOARDSYNC_SYNC_INTERVAL", DEFAULT_SYNC_INTERVAL),
            webhook_delay=_positive_float(env, "BOARDSYNC_WEBHOOK_DELAY", DEFAULT_WEBHOOK_DELAY),
            host=env.get("HOST", DEFAULT_HOST),
            port=_positive_int(env, "PORT", DEFAULT_PORT),
        )


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got '{raw}'")
    return value


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got '{raw}'") from e
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got '{raw}'")
    return value
