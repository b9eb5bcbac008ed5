"""CRUD operations for clients."""

from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from tidyhq.core.errors import ValidationFailed
from tidyhq.crud.base import CRUDBase
from tidyhq.models.client import Client
from tidyhq.schemas.client import ClientCreate, ClientUpdate


class CRUDClient(CRUDBase[Client, ClientCreate, ClientUpdate]):
    def search(self, db: Session, *, term: str) -> List[Client]:
        pattern = f"%{term}%"
        return (
            db.query(Client)
            .filter(
                or_(
                    Client.name.ilike(pattern),
                    Client.email.ilike(pattern),
                    Client.phone.ilike(pattern),
                )
            )
            .order_by(Client.created_at.desc())
            .all()
        )


client_crud = CRUDClient(Client)


def ensure_client_exists(db: Session, client_id: Optional[str]) -> None:
    """Reject writes that point at a client which does not exist."""
    if client_id is not None and client_crud.get(db, client_id) is None:
        raise ValidationFailed.for_field("clientId", "Client not found")
