"""Plan computation - decides what each source record does to the target."""

from __future__ import annotations

import logging
from collections.abc import Sequence  # noqa: TC003
from typing import TYPE_CHECKING

from boardsync.reconciler.matcher import build_index, lookup
from boardsync.reconciler.models import CreateAction, SkipAction, SyncPlan, UpdateAction
from boardsync.reconciler.policy import pulled_fields

if TYPE_CHECKING:
    from boardsync.records.models import Direction, SyncRecord
    from boardsync.state_store import FieldPolicy

logger = logging.getLogger(__name__)


def compute_plan(
    direction: Direction,
    source_records: Sequence[SyncRecord],
    target_records: Sequence[SyncRecord],
    policy: FieldPolicy,
) -> SyncPlan:
    """Compute the create/update/skip plan for one direction.

    Unmatched source records become creates carrying all four logical fields,
    whatever the policy says. Matched records become updates carrying the
    fields the policy lets this direction push, with the source's values.
    Target values are not compared: pushing an unchanged value is a no-op on
    the remote. A match with nothing to push becomes a skip.

    Args:
        direction: Direction of the pass.
        source_records: Full snapshot of the source platform.
        target_records: Full snapshot of the target platform.
        policy: Field policy in effect for this pass.

    Returns:
        SyncPlan with one action per source record, in source order.
    """
    index = build_index(target_records)
    allowed = pulled_fields(policy, direction)
    plan = SyncPlan(direction=direction)

    for record in source_records:
        values = record.fields()
        existing = lookup(index, record.key)

        if existing is None:
            plan.actions.append(CreateAction(key=record.key, fields=values))
            continue

        update_fields = {name: values[name] for name in allowed}
        if update_fields:
            plan.actions.append(
                UpdateAction(key=record.key, remote_id=existing.remote_id, fields=update_fields)
            )
        else:
            plan.actions.append(SkipAction(key=record.key, remote_id=existing.remote_id))

    logger.debug(
        "Planned %s: %d create(s), %d update(s), %d skip(s)",
        direction,
        len(plan.creates),
        len(plan.updates),
        len(plan.skips),
    )
    return plan
