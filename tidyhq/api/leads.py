"""Sales pipeline endpoints, including lead-to-client conversion."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_lead import lead_crud
from tidyhq.crud.crud_user import ensure_user_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.lead import Lead
from tidyhq.schemas.lead import AllowedLeadStatus, LeadConversion, LeadCreate, LeadRead, LeadUpdate
from tidyhq.services.lead_conversion import convert_lead_to_client

router = APIRouter(prefix="/api/leads", tags=["leads"], dependencies=[Depends(require_user)])


def _get_lead(db: Session, lead_id: str) -> Lead:
    lead = lead_crud.get(db, lead_id)
    if not lead:
        raise NotFound.entity("Lead")
    return lead


@router.get("", response_model=list[LeadRead])
def list_leads(status: Optional[AllowedLeadStatus] = None, db: Session = Depends(get_db)):
    if status:
        return lead_crud.get_by_status(db, status=status)
    return lead_crud.get_multi(db)


@router.get("/{lead_id}", response_model=LeadRead)
def get_lead(lead_id: str, db: Session = Depends(get_db)):
    return _get_lead(db, lead_id)


@router.post("", response_model=LeadRead, status_code=status.HTTP_201_CREATED)
def create_lead(lead_in: LeadCreate, db: Session = Depends(get_db)):
    ensure_user_exists(db, lead_in.assigned_to, "assignedTo")
    return lead_crud.create(db, obj_in=lead_in)


@router.patch("/{lead_id}", response_model=LeadRead)
def update_lead(lead_id: str, lead_in: LeadUpdate, db: Session = Depends(get_db)):
    lead = _get_lead(db, lead_id)
    ensure_user_exists(db, lead_in.assigned_to, "assignedTo")
    return lead_crud.update(db, db_obj=lead, obj_in=lead_in)


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(lead_id: str, db: Session = Depends(get_db)):
    if not lead_crud.delete(db, id=lead_id):
        raise NotFound.entity("Lead")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{lead_id}/convert", response_model=LeadConversion)
def convert_lead(lead_id: str, db: Session = Depends(get_db)):
    lead, client = convert_lead_to_client(db, lead_id)
    return {"lead": lead, "client": client}
