"""REST API and webhook endpoints for BoardSync."""

from boardsync.api.app import app, create_app
from boardsync.api.models import (
    APIResponse,
    FieldPolicyModel,
    StatusResponse,
    SyncPassResponse,
)

__all__ = [
    "APIResponse",
    "FieldPolicyModel",
    "StatusResponse",
    "SyncPassResponse",
    "app",
    "create_app",
]
