"""Field policy evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boardsync.records.models import Direction, FieldOwner, LogicalField

if TYPE_CHECKING:
    from boardsync.state_store import FieldPolicy


def should_pull(policy: FieldPolicy, name: LogicalField, direction: Direction) -> bool:
    """Whether a pass in `direction` may overwrite `name` on the target.

    True iff the field is owned by both platforms or by the source platform
    of the direction.
    """
    owner = policy.owner(name)
    return owner is FieldOwner.BOTH or owner.value == direction.source.value


def pulled_fields(policy: FieldPolicy, direction: Direction) -> list[LogicalField]:
    """Logical fields a pass in `direction` pushes onto existing records."""
    return [name for name in LogicalField if should_pull(policy, name, direction)]
