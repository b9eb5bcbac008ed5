"""Client directory endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_client import client_crud
from tidyhq.crud.crud_user import ensure_user_exists
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.client import Client
from tidyhq.schemas.client import ClientCreate, ClientRead, ClientUpdate

router = APIRouter(prefix="/api/clients", tags=["clients"], dependencies=[Depends(require_user)])


def _get_client(db: Session, client_id: str) -> Client:
    client = client_crud.get(db, client_id)
    if not client:
        raise NotFound.entity("Client")
    return client


@router.get("", response_model=list[ClientRead])
def list_clients(search: Optional[str] = None, db: Session = Depends(get_db)):
    if search:
        return client_crud.search(db, term=search)
    return client_crud.get_multi(db)


@router.get("/{client_id}", response_model=ClientRead)
def get_client(client_id: str, db: Session = Depends(get_db)):
    return _get_client(db, client_id)


@router.post("", response_model=ClientRead, status_code=status.HTTP_201_CREATED)
def create_client(client_in: ClientCreate, db: Session = Depends(get_db)):
    ensure_user_exists(db, client_in.assigned_to, "assignedTo")
    return client_crud.create(db, obj_in=client_in)


@router.patch("/{client_id}", response_model=ClientRead)
def update_client(client_id: str, client_in: ClientUpdate, db: Session = Depends(get_db)):
    client = _get_client(db, client_id)
    ensure_user_exists(db, client_in.assigned_to, "assignedTo")
    return client_crud.update(db, db_obj=client, obj_in=client_in)


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(client_id: str, db: Session = Depends(get_db)):
    if not client_crud.delete(db, id=client_id):
        raise NotFound.entity("Client")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
