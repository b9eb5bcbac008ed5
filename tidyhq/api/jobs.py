"""Job tracker endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from tidyhq.core.errors import NotFound
from tidyhq.crud.crud_client import ensure_client_exists
from tidyhq.crud.crud_job import job_crud
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.models.job import Job
from tidyhq.schemas.job import JobCreate, JobRead, JobStatus, JobUpdate

router = APIRouter(prefix="/api/jobs", tags=["jobs"], dependencies=[Depends(require_user)])


def _get_job(db: Session, job_id: str) -> Job:
    job = job_crud.get(db, job_id)
    if not job:
        raise NotFound.entity("Job")
    return job


@router.get("", response_model=list[JobRead])
def list_jobs(
    status: Optional[JobStatus] = None,
    client_id: Optional[str] = Query(default=None, alias="clientId"),
    start_date: Optional[datetime] = Query(default=None, alias="startDate"),
    end_date: Optional[datetime] = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
):
    # One filter at a time, in this order of precedence
    if status:
        return job_crud.get_by_status(db, status=status)
    if client_id:
        return job_crud.get_by_client(db, client_id=client_id)
    if start_date and end_date:
        return job_crud.get_by_date_range(db, start=start_date, end=end_date)
    return job_crud.get_multi(db)


@router.get("/{job_id}", response_model=JobRead)
def get_job(job_id: str, db: Session = Depends(get_db)):
    return _get_job(db, job_id)


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
def create_job(job_in: JobCreate, db: Session = Depends(get_db)):
    ensure_client_exists(db, job_in.client_id)
    return job_crud.create(db, obj_in=job_in)


@router.patch("/{job_id}", response_model=JobRead)
def update_job(job_id: str, job_in: JobUpdate, db: Session = Depends(get_db)):
    job = _get_job(db, job_id)
    ensure_client_exists(db, job_in.client_id)
    return job_crud.update(db, db_obj=job, obj_in=job_in)


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    if not job_crud.delete(db, id=job_id):
        raise NotFound.entity("Job")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
