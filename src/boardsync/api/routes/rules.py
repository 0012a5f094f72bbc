"""Field sync rule endpoints."""

import logging

from fastapi import APIRouter

from boardsync.api.dependencies import StateStoreDep
from boardsync.api.models import APIResponse, FieldPolicyModel, policy_to_response
from boardsync.logging import log_event
from boardsync.state_store import LogSeverity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["rules"])


@router.get("/rules", response_model=APIResponse[FieldPolicyModel])
def get_rules(store: StateStoreDep) -> APIResponse[FieldPolicyModel]:
    """Get the source of truth for each field."""
    return APIResponse(data=policy_to_response(store.get_policy()))


@router.put("/rules", response_model=APIResponse[FieldPolicyModel])
def update_rules(body: FieldPolicyModel, store: StateStoreDep) -> APIResponse[FieldPolicyModel]:
    """Replace the field policy. Omitted fields revert to their defaults."""
    policy = body.to_policy()
    store.set_policy(policy)
    log_event(
        logger,
        store,
        "Field rules updated: "
        + ", ".join(f"{name.capitalize()}={owner}" for name, owner in policy.as_dict().items()),
        LogSeverity.SUCCESS,
    )
    return APIResponse(data=policy_to_response(policy))
