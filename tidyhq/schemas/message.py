"""Message and conversation schemas."""

from datetime import datetime
from typing import Literal, Optional

from tidyhq.schemas.common import CamelModel

MessageType = Literal["sms", "email"]
MessageDirection = Literal["inbound", "outbound"]
MessageStatus = Literal["sent", "delivered", "read", "failed"]


class MessageBase(CamelModel):
    client_id: str
    type: MessageType
    direction: MessageDirection
    content: str
    status: MessageStatus = "sent"
    sent_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    read_at: Optional[datetime] = None
    sent_by: Optional[str] = None


class MessageCreate(MessageBase):
    pass


class MessageUpdate(CamelModel):
    type: Optional[MessageType] = None
    direction: Optional[MessageDirection] = None
    content: Optional[str] = None
    status: Optional[MessageStatus] = None
    delivered_at: Optional[datetime] = None
    read_at: Optional[datetime] = None


class MessageRead(MessageBase):
    id: str
    sent_at: datetime
    created_at: datetime


class Conversation(CamelModel):
    client_id: str
    last_message: MessageRead
    unread_count: int
