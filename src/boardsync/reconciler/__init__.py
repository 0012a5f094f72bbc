"""Reconciler - Matching, field policy and plan computation/application."""

from boardsync.reconciler.matcher import build_index, lookup
from boardsync.reconciler.models import (
    CreateAction,
    OutcomeStatus,
    PlanAction,
    RecordOutcome,
    SkipAction,
    SyncPassResult,
    SyncPlan,
    UpdateAction,
)
from boardsync.reconciler.planner import compute_plan
from boardsync.reconciler.policy import pulled_fields, should_pull
from boardsync.reconciler.reconciler import Reconciler

__all__ = [
    "CreateAction",
    "OutcomeStatus",
    "PlanAction",
    "Reconciler",
    "RecordOutcome",
    "SkipAction",
    "SyncPassResult",
    "SyncPlan",
    "UpdateAction",
    "build_index",
    "compute_plan",
    "lookup",
    "pulled_fields",
    "should_pull",
]
