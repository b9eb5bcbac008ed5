"""Messaging inbox endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_message import message_crud
from tidyhq.crud.crud_user import ensure_user_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.message import Message
from tidyhq.models.user import User
from tidyhq.schemas.message import Conversation, MessageCreate, MessageRead, MessageUpdate
from tidyhq.services.conversations import get_conversations

router = APIRouter(prefix="/api", tags=["messages"])


def _get_message(db: Session, message_id: str) -> Message:
    message = message_crud.get(db, message_id)
    if not message:
        raise NotFound.entity("Message")
    return message


@router.get("/messages", response_model=list[MessageRead])
def list_messages(
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    if client_id:
        return message_crud.get_by_client(db, client_id=client_id)
    return message_crud.get_multi(db)


@router.get("/conversations", response_model=list[Conversation])
def list_conversations(db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return get_conversations(db)


@router.get("/messages/{message_id}", response_model=MessageRead)
def get_message(message_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    return _get_message(db, message_id)


@router.post("/messages", response_model=MessageRead, status_code=status.HTTP_201_CREATED)
def create_message(message_in: MessageCreate, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    ensure_client_exists(db, message_in.client_id)
    ensure_user_exists(db, message_in.sent_by, "sentBy")
    # Outbound messages default to the signed-in sender
    extra = {}
    if message_in.sent_by is None and message_in.direction == "outbound":
        extra["sent_by"] = current_user.id
    # TODO: hand outbound messages to an SMS/email provider once one is chosen
    return message_crud.create(db, obj_in=message_in, **extra)


@router.patch("/messages/{message_id}/read", response_model=MessageRead)
def mark_message_read(message_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    message = _get_message(db, message_id)
    return message_crud.mark_read(db, db_obj=message)


@router.patch("/messages/{message_id}", response_model=MessageRead)
def update_message(
    message_id: str,
    message_in: MessageUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_user),
):
    message = _get_message(db, message_id)
    return message_crud.update(db, db_obj=message, obj_in=message_in)


@router.delete("/messages/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(message_id: str, db: Session = Depends(get_db), current_user: User = Depends(require_user)):
    if not message_crud.delete(db, id=message_id):
        raise NotFound.entity("Message")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
