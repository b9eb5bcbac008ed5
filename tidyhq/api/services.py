"""Service catalog endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_service import service_crud
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.service import Service
from tidyhq.schemas.service import ServiceCreate, ServiceRead, ServiceUpdate

router = APIRouter(prefix="/api/services", tags=["services"], dependencies=[Depends(require_user)])


def _get_service(db: Session, service_id: str) -> Service:
    service = service_crud.get(db, service_id)
    if not service:
        raise NotFound.entity("Service")
    return service


@router.get("", response_model=list[ServiceRead])
def list_services(active: Optional[bool] = None, db: Session = Depends(get_db)):
    if active:
        return service_crud.get_active(db)
    return service_crud.get_multi(db)


@router.get("/{service_id}", response_model=ServiceRead)
def get_service(service_id: str, db: Session = Depends(get_db)):
    return _get_service(db, service_id)


@router.post("", response_model=ServiceRead, status_code=status.HTTP_201_CREATED)
def create_service(service_in: ServiceCreate, db: Session = Depends(get_db)):
    return service_crud.create(db, obj_in=service_in)


@router.patch("/{service_id}", response_model=ServiceRead)
def update_service(service_id: str, service_in: ServiceUpdate, db: Session = Depends(get_db)):
    service = _get_service(db, service_id)
    return service_crud.update(db, db_obj=service, obj_in=service_in)


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service(service_id: str, db: Session = Depends(get_db)):
    if not service_crud.delete(db, id=service_id):
        raise NotFound.entity("Service")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
