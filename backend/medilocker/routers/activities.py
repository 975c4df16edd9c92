"""
Activity log routes for the authenticated identity.
"""
from fastapi import APIRouter, Request

from medilocker.core.logging import get_logger
from medilocker.core.session_guard import CurrentIdentity
from medilocker.routers.deps import LedgerDep
from medilocker.schemas.activity import (
    ActivityCreate,
    ActivityListResponse,
    ActivityLoggedResponse,
    ActivityResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/activities", tags=["activities"])


@router.get("", response_model=ActivityListResponse)
async def list_activities(
    request: Request,
    identity: CurrentIdentity,
    ledger: LedgerDep,
) -> ActivityListResponse:
    """Most recent activities of the caller, newest first."""
    page_size = request.app.state.settings.activity_page_size
    records = await ledger.list_recent(identity.identity_id, page_size)
    return ActivityListResponse(
        activities=[ActivityResponse.model_validate(record) for record in records],
    )


@router.post("", response_model=ActivityLoggedResponse)
async def log_activity(
    activity: ActivityCreate,
    identity: CurrentIdentity,
    ledger: LedgerDep,
) -> ActivityLoggedResponse:
    """
    Record an activity for the caller.

    Used by the dashboard and hospital search pages; storage failures
    surface as 500.
    """
    await ledger.record(identity.identity_id, activity.action, activity.details)
    logger.info("Activity logged", identity_id=str(identity.identity_id), action=activity.action)
    return ActivityLoggedResponse()
