"""CRUD operations for the service catalog."""

from typing import List

from sqlalchemy.orm import Session

from tidyhq.crud.base import CRUDBase
from tidyhq.models.service import Service
from tidyhq.schemas.service import ServiceCreate, ServiceUpdate


class CRUDService(CRUDBase[Service, ServiceCreate, ServiceUpdate]):
    def get_active(self, db: Session) -> List[Service]:
        return db.query(Service).filter(Service.is_active.is_(True)).order_by(Service.name.asc()).all()


service_crud = CRUDService(Service)
