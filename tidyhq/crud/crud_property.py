"""CRUD operations for client properties. Deleting a property only deactivates it."""

from typing import List

from sqlalchemy.orm import Session

from tidyhq.crud.base import CRUDBase
from tidyhq.models.property import Property
from tidyhq.schemas.property import PropertyCreate, PropertyUpdate


class CRUDProperty(CRUDBase[Property, PropertyCreate, PropertyUpdate]):
    def get_by_client(self, db: Session, *, client_id: str) -> List[Property]:
        return (
            db.query(Property)
            .filter(Property.client_id == client_id, Property.is_active.is_(True))
            .order_by(Property.created_at.desc())
            .all()
        )

    def delete(self, db: Session, *, id: str) -> bool:
        obj = self.get(db, id)
        if obj is None:
            return False
        obj.is_active = False
        db.commit()
        return True


property_crud = CRUDProperty(Property)
