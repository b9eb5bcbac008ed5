"""CRUD operations for jobs.

A job's `completed_at` is kept in step with its status: it is stamped when the
job becomes "completed" and cleared when it moves to any other status.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from tidyhq.core.errors import ValidationFailed
from tidyhq.core.time import utc_now
from tidyhq.crud.base import CRUDBase
from tidyhq.models.job import Job
from tidyhq.schemas.job import JobCreate, JobUpdate

COMPLETED = "completed"


class CRUDJob(CRUDBase[Job, JobCreate, JobUpdate]):
    def get_by_status(self, db: Session, *, status: str) -> List[Job]:
        return db.query(Job).filter(Job.status == status).order_by(Job.scheduled_date.desc()).all()

    def get_by_client(self, db: Session, *, client_id: str) -> List[Job]:
        return db.query(Job).filter(Job.client_id == client_id).order_by(Job.scheduled_date.desc()).all()

    def get_by_date_range(self, db: Session, *, start: datetime, end: datetime) -> List[Job]:
        return (
            db.query(Job)
            .filter(Job.scheduled_date >= start, Job.scheduled_date <= end)
            .order_by(Job.scheduled_date.asc())
            .all()
        )

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if data.get("status", "scheduled") == COMPLETED:
            data["completed_at"] = data.get("completed_at") or utc_now()
        else:
            data["completed_at"] = None
        return data

    def _prepare_update(self, db_obj: Job, data: Dict[str, Any]) -> Dict[str, Any]:
        status = data.get("status", db_obj.status)
        if status == COMPLETED:
            if "status" in data and db_obj.status != COMPLETED:
                data["completed_at"] = data.get("completed_at") or utc_now()
            elif "completed_at" in data and data["completed_at"] is None:
                # A completed job always keeps its completion time
                data.pop("completed_at")
        else:
            data["completed_at"] = None
        return data


job_crud = CRUDJob(Job)


def ensure_job_exists(db: Session, job_id: Optional[str], field: str = "jobId") -> None:
    if job_id is not None and job_crud.get(db, job_id) is None:
        raise ValidationFailed.for_field(field, "Job not found")
