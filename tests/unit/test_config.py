"""Unit tests for environment-driven settings."""

import pytest

from boardsync.config import DEFAULT_PORT, Settings
from boardsync.orchestrator import DEFAULT_SYNC_INTERVAL, DEFAULT_WEBHOOK_DELAY
from boardsync.records import ConfigurationError


@pytest.mark.unit
class TestFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        """An empty environment gives disabled sync and default timings."""
        settings = Settings.from_env({})

        assert settings.sync_enabled is False
        assert settings.sync_interval == DEFAULT_SYNC_INTERVAL == 300.0
        assert settings.webhook_delay == DEFAULT_WEBHOOK_DELAY == 1.0
        assert settings.port == DEFAULT_PORT == 3000
        assert settings.credentials.missing() == [
            "hubspot_token",
            "monday_token",
            "monday_board_id",
        ]

    def test_reads_credentials(self) -> None:
        settings = Settings.from_env(
            {
                "HUBSPOT_TOKEN": "pat-na1-abc",
                "MONDAY_TOKEN": "monday-abc",
                "MONDAY_BOARD_ID": "42",
            }
        )

        assert settings.credentials.is_complete
        assert settings.credentials.monday_board_id == "42"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", " on "])
    def test_sync_enabled_truthy(self, value: str) -> None:
        assert Settings.from_env({"BOARDSYNC_SYNC_ENABLED": value}).sync_enabled is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no"])
    def test_sync_enabled_falsy(self, value: str) -> None:
        assert Settings.from_env({"BOARDSYNC_SYNC_ENABLED": value}).sync_enabled is False

    def test_numeric_overrides(self) -> None:
        settings = Settings.from_env(
            {
                "BOARDSYNC_SYNC_INTERVAL": "60",
                "BOARDSYNC_WEBHOOK_DELAY": "0.5",
                "HOST": "127.0.0.1",
                "PORT": "8080",
            }
        )

        assert settings.sync_interval == 60.0
        assert settings.webhook_delay == 0.5
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080

    def test_invalid_number(self) -> None:
        with pytest.raises(ConfigurationError, match="BOARDSYNC_SYNC_INTERVAL must be a number"):
            Settings.from_env({"BOARDSYNC_SYNC_INTERVAL": "often"})

    def test_non_positive_number(self) -> None:
        with pytest.raises(ConfigurationError, match="BOARDSYNC_WEBHOOK_DELAY must be positive"):
            Settings.from_env({"BOARDSYNC_WEBHOOK_DELAY": "0"})

    @pytest.mark.parametrize("value", ["3000.9", "http", "1e3"])
    def test_port_must_be_integer(self, value: str) -> None:
        with pytest.raises(ConfigurationError, match="PORT must be an integer"):
            Settings.from_env({"PORT": value})

    def test_port_must_be_positive(self) -> None:
        with pytest.raises(ConfigurationError, match="PORT must be positive"):
            Settings.from_env({"PORT": "-1"})
