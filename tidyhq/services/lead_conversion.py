"""Lead-to-client conversion.

Creating the client and marking the lead as won happen in one transaction, so
a failure part-way leaves neither write behind.
"""

import logging

from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound, ValidationFailed
from tidyhq.crud.crud_client import client_crud
from tidyhq.crud.crud_lead import lead_crud
from tidyhq.models.client import Client
from tidyhq.models.lead import Lead
from tidyhq.schemas.client import ClientCreate

logger = logging.getLogger(__name__)

WON = "won"
ALREADY_CONVERTED = "Lead has already been converted to a client"


def client_from_lead(lead: Lead) -> ClientCreate:
    return ClientCreate(
        name=lead.name,
        email=lead.email,
        phone=lead.phone,
        address=lead.address or "",
        tags=[],
        status="active",
        notes=lead.notes or "",
    )


def convert_lead_to_client(db: Session, lead_id: str) -> tuple[Lead, Client]:
    lead = lead_crud.get(db, lead_id)
    if lead is None:
        raise NotFound.entity("Lead")
    if lead.client_id is not None:
        raise ValidationFailed.for_field("clientId", ALREADY_CONVERTED)

    try:
        client = client_crud.create(db, obj_in=client_from_lead(lead), commit=False)
        if not lead_crud.claim_for_client(db, lead_id=lead.id, client_id=client.id, status=WON):
            # Another request converted the lead after it was read above
            raise ValidationFailed.for_field("clientId", ALREADY_CONVERTED)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(client)
    db.refresh(lead)
    logger.info("Converted lead %s into client %s", lead.id, client.id)
    return lead, client
