"""Unit tests for field policy evaluation."""

import pytest

from boardsync.reconciler import pulled_fields, should_pull
from boardsync.records import Direction, FieldOwner, LogicalField
from boardsync.state_store import DEFAULT_POLICY, FieldPolicy

H2M = Direction.HUBSPOT_TO_MONDAY
M2H = Direction.MONDAY_TO_HUBSPOT


@pytest.mark.unit
class TestShouldPull:
    """Tests for should_pull."""

    @pytest.mark.parametrize(
        ("owner", "direction", "expected"),
        [
            (FieldOwner.HUBSPOT, H2M, True),
            (FieldOwner.HUBSPOT, M2H, False),
            (FieldOwner.MONDAY, H2M, False),
            (FieldOwner.MONDAY, M2H, True),
            (FieldOwner.BOTH, H2M, True),
            (FieldOwner.BOTH, M2H, True),
        ],
    )
    def test_owner_and_direction(
        self, owner: FieldOwner, direction: Direction, expected: bool
    ) -> None:
        """Pulls iff owner is both or the direction's source."""
        policy = FieldPolicy(status=owner)

        assert should_pull(policy, LogicalField.STATUS, direction) is expected

    def test_accepts_plain_field_names(self) -> None:
        """Field names given as strings are evaluated like enum members."""
        assert should_pull(DEFAULT_POLICY, "title", H2M) is True  # type: ignore[arg-type]


@pytest.mark.unit
class TestPulledFields:
    """Tests for pulled_fields."""

    def test_default_policy_hubspot_to_monday(self) -> None:
        """HubSpot pushes title and description by default."""
        assert pulled_fields(DEFAULT_POLICY, H2M) == [
            LogicalField.TITLE,
            LogicalField.DESCRIPTION,
        ]

    def test_default_policy_monday_to_hubspot(self) -> None:
        """Monday.com pushes status and priority by default."""
        assert pulled_fields(DEFAULT_POLICY, M2H) == [
            LogicalField.STATUS,
            LogicalField.PRIORITY,
        ]

    def test_all_both(self) -> None:
        """Every field is pulled in both directions when shared."""
        policy = FieldPolicy(
            title=FieldOwner.BOTH,
            description=FieldOwner.BOTH,
            status=FieldOwner.BOTH,
            priority=FieldOwner.BOTH,
        )

        assert pulled_fields(policy, H2M) == list(LogicalField)
        assert pulled_fields(policy, M2H) == list(LogicalField)

    def test_nothing_owned_by_source(self) -> None:
        """No fields pulled when the target owns everything."""
        policy = FieldPolicy(
            title=FieldOwner.MONDAY,
            description=FieldOwner.MONDAY,
            status=FieldOwner.MONDAY,
            priority=FieldOwner.MONDAY,
        )

        assert pulled_fields(policy, H2M) == []
