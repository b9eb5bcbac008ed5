"""CRUD operations for client messages.

`read_at` is only ever set while a message's status is "read".
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from tidyhq.core.time import utc_now
from tidyhq.crud.base import CRUDBase
from tidyhq.models.message import Message
from tidyhq.schemas.message import MessageCreate, MessageUpdate

READ = "read"


class CRUDMessage(CRUDBase[Message, MessageCreate, MessageUpdate]):
    def get_multi(self, db: Session) -> List[Message]:
        return db.query(Message).order_by(Message.sent_at.desc()).all()

    def get_by_client(self, db: Session, *, client_id: str) -> List[Message]:
        return db.query(Message).filter(Message.client_id == client_id).order_by(Message.sent_at.asc()).all()

    def mark_read(self, db: Session, *, db_obj: Message) -> Message:
        # _prepare_update stamps read_at only when the message has none yet
        return self.update(db, db_obj=db_obj, obj_in={"status": READ})

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("status", "sent") == READ:
            data["read_at"] = data.get("read_at") or utc_now()
        else:
            data["read_at"] = None
        return data

    def _prepare_update(self, db_obj: Message, data: Dict[str, Any]) -> Dict[str, Any]:
        status = data.get("status", db_obj.status)
        if status == READ:
            if db_obj.read_at is None and not data.get("read_at"):
                data["read_at"] = utc_now()
            elif "read_at" in data and data["read_at"] is None:
                data.pop("read_at")
        else:
            data["read_at"] = None
        return data


message_crud = CRUDMessage(Message)
