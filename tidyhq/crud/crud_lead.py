"""CRUD operations for sales-pipeline leads."""

from typing import List, Optional

from sqlalchemy.orm import Session

from tidyhq.core.errors import ValidationFailed
from tidyhq.core.time import utc_now
from tidyhq.crud.base import CRUDBase
from tidyhq.models.lead import Lead
from tidyhq.schemas.lead import LeadCreate, LeadUpdate


class CRUDLead(CRUDBase[Lead, LeadCreate, LeadUpdate]):
    def get_by_status(self, db: Session, *, status: str) -> List[Lead]:
        return db.query(Lead).filter(Lead.status == status).order_by(Lead.created_at.desc()).all()

    def claim_for_client(self, db: Session, *, lead_id: str, client_id: str, status: str) -> bool:
        """Link an unconverted lead to a client without committing.

        The update only matches while `client_id` is still NULL, so of two
        concurrent conversions exactly one claims the lead.
        """
        claimed = (
            db.query(Lead)
            .filter(Lead.id == lead_id, Lead.client_id.is_(None))
            .update(
                {Lead.client_id: client_id, Lead.status: status, Lead.updated_at: utc_now()},
                synchronize_session=False,
            )
        )
        return claimed == 1


lead_crud = CRUDLead(Lead)


def ensure_lead_exists(db: Session, lead_id: Optional[str], field: str = "leadId") -> None:
    if lead_id is not None and lead_crud.get(db, lead_id) is None:
        raise ValidationFailed.for_field(field, "Lead not found")
