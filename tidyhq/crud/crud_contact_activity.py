"""CRUD operations for contact activities."""

from typing import List

from sqlalchemy.orm import Session

from tidyhq.crud.base import CRUDBase
from tidyhq.models.contact_activity import ContactActivity
from tidyhq.schemas.contact_activity import ContactActivityCreate, ContactActivityUpdate


class CRUDContactActivity(CRUDBase[ContactActivity, ContactActivityCreate, ContactActivityUpdate]):
    def get_by_client(self, db: Session, *, client_id: str) -> List[ContactActivity]:
        return (
            db.query(ContactActivity)
            .filter(ContactActivity.client_id == client_id)
            .order_by(ContactActivity.scheduled_at.desc())
            .all()
        )

    def get_by_type(self, db: Session, *, activity_type: str) -> List[ContactActivity]:
        return (
            db.query(ContactActivity)
            .filter(ContactActivity.activity_type == activity_type)
            .order_by(ContactActivity.scheduled_at.desc())
            .all()
        )


contact_activity_crud = CRUDContactActivity(ContactActivity)
