"""CRUD operations for follow-ups."""

from typing import List

from sqlalchemy.orm import Session

from tidyhq.crud.base import CRUDBase
from tidyhq.models.follow_up import FollowUp
from tidyhq.schemas.follow_up import FollowUpCreate, FollowUpUpdate


class CRUDFollowUp(CRUDBase[FollowUp, FollowUpCreate, FollowUpUpdate]):
    def get_by_client(self, db: Session, *, client_id: str) -> List[FollowUp]:
        return db.query(FollowUp).filter(FollowUp.client_id == client_id).order_by(FollowUp.scheduled_date.asc()).all()

    def get_by_assignee(self, db: Session, *, user_id: str) -> List[FollowUp]:
        return db.query(FollowUp).filter(FollowUp.assigned_to == user_id).order_by(FollowUp.scheduled_date.asc()).all()

    def get_pending(self, db: Session) -> List[FollowUp]:
        return db.query(FollowUp).filter(FollowUp.status == "pending").order_by(FollowUp.scheduled_date.asc()).all()


follow_up_crud = CRUDFollowUp(FollowUp)
