"""Client property endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_property import property_crud
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.property import Property
from tidyhq.schemas.property import PropertyCreate, PropertyRead, PropertyUpdate

router = APIRouter(prefix="/api/properties", tags=["properties"], dependencies=[Depends(require_user)])


def _get_property(db: Session, property_id: str) -> Property:
    prop = property_crud.get(db, property_id)
    if not prop:
        raise NotFound.entity("Property")
    return prop


@router.get("", response_model=list[PropertyRead])
def list_properties(client_id: Optional[str] = Query(default=None, alias="clientId"), db: Session = Depends(get_db)):
    if client_id:
        return property_crud.get_by_client(db, client_id=client_id)
    return property_crud.get_multi(db)


@router.get("/{property_id}", response_model=PropertyRead)
def get_property(property_id: str, db: Session = Depends(get_db)):
    return _get_property(db, property_id)


@router.post("", response_model=PropertyRead, status_code=status.HTTP_201_CREATED)
def create_property(property_in: PropertyCreate, db: Session = Depends(get_db)):
    ensure_client_exists(db, property_in.client_id)
    return property_crud.create(db, obj_in=property_in)


@router.patch("/{property_id}", response_model=PropertyRead)
def update_property(property_id: str, property_in: PropertyUpdate, db: Session = Depends(get_db)):
    prop = _get_property(db, property_id)
    return property_crud.update(db, db_obj=prop, obj_in=property_in)


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(property_id: str, db: Session = Depends(get_db)):
    if not property_crud.delete(db, id=property_id):
        raise NotFound.entity("Property")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
