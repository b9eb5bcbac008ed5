"""Follow-up endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.core.time import utc_now
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_follow_up import follow_up_crud
from tidyhq.crud.crud_lead import ensure_lead_exists
from tidyhq.crud.crud_user import ensure_user_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.follow_up import FollowUp
from tidyhq.models.user import User
from tidyhq.schemas.follow_up import FollowUpCreate, FollowUpRead, FollowUpUpdate

router = APIRouter(prefix="/api/follow-ups", tags=["follow-ups"])


def _get_follow_up(db: Session, follow_up_id: str) -> FollowUp:
    follow_up = follow_up_crud.get(db, follow_up_id)
    if not follow_up:
        raise NotFound.entity("Follow-up")
    return follow_up


@router.get("", response_model=list[FollowUpRead])
def list_follow_ups(
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    assigned_to: Optional[str] = Query(default=None, alias="assignedTo"),
    pending: Optional[bool] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    if client_id:
        return follow_up_crud.get_by_client(db, client_id=client_id)
    if assigned_to:
        return follow_up_crud.get_by_assignee(db, user_id=assigned_to)
    if pending:
        return follow_up_crud.get_pending(db)
    return follow_up_crud.get_multi(db)


@router.get("/{follow_up_id}", response_model=FollowUpRead)
def get_follow_up(follow_up_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return _get_follow_up(db, follow_up_id)


@router.post("", response_model=FollowUpRead, status_code=status.HTTP_201_CREATED)
def create_follow_up(
    follow_up_in: FollowUpCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    ensure_client_exists(db, follow_up_in.client_id)
    ensure_lead_exists(db, follow_up_in.lead_id)
    ensure_user_exists(db, follow_up_in.assigned_to, "assignedTo")
    ensure_user_exists(db, follow_up_in.created_by, "createdBy")
    return follow_up_crud.create(
        db,
        obj_in=follow_up_in,
        assigned_to=follow_up_in.assigned_to or current_user.id,
        created_by=follow_up_in.created_by or current_user.id,
    )


@router.patch("/{follow_up_id}", response_model=FollowUpRead)
def update_follow_up(
    follow_up_id: str,
    follow_up_in: FollowUpUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    follow_up = _get_follow_up(db, follow_up_id)
    ensure_lead_exists(db, follow_up_in.lead_id)
    ensure_user_exists(db, follow_up_in.assigned_to, "assignedTo")
    ensure_user_exists(db, follow_up_in.completed_by, "completedBy")
    update_data = follow_up_in.model_dump(exclude_unset=True)
    if update_data.get("status") == "completed" and follow_up.status != "completed":
        update_data["completed_at"] = update_data.get("completed_at") or utc_now()
        update_data["completed_by"] = update_data.get("completed_by") or current_user.id
    return follow_up_crud.update(db, db_obj=follow_up, obj_in=update_data)


@router.delete("/{follow_up_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_follow_up(follow_up_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    if not follow_up_crud.delete(db, id=follow_up_id):
        raise NotFound.entity("Follow-up")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
