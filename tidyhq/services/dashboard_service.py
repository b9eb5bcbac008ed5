"""Dashboard statistics built from independent aggregate queries."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tidyhq.core.errors import Unavailable
from tidyhq.core.time import start_of_month, utc_now
from tidyhq.models.booking import Booking
from tidyhq.models.client import Client
from tidyhq.models.job import Job
from tidyhq.models.lead import Lead
from tidyhq.models.message import Message
from tidyhq.models.service import Service
from tidyhq.schemas.lead import EARLY_PIPELINE_STATUSES

logger = logging.getLogger(__name__)


def get_dashboard_stats(db: Session, *, now: Optional[datetime] = None) -> dict:
    """Return the six headline numbers; raise Unavailable if the database cannot answer.

    A failure is reported as such rather than as a row of zeros, which would be
    indistinguishable from a business with no activity.
    """
    now = now or utc_now()
    try:
        total_clients = db.query(Client).filter(Client.status == "active").count()
        total_jobs = db.query(Job).count()
        total_revenue = (
            db.query(func.coalesce(func.sum(Job.cost), 0)).filter(Job.status == "completed").scalar()
        )
        active_leads = db.query(Lead).filter(Lead.status.in_(EARLY_PIPELINE_STATUSES)).count()
        completed_jobs_this_month = (
            db.query(Job)
            .filter(Job.status == "completed", Job.completed_at >= start_of_month(now))
            .count()
        )
        pending_bookings = db.query(Booking).filter(Booking.status == "pending").count()
    except SQLAlchemyError as exc:
        logger.exception("Dashboard statistics query failed")
        raise Unavailable("Dashboard statistics unavailable") from exc

    return {
        "total_clients": total_clients,
        "total_jobs": total_jobs,
        "total_revenue": round(float(total_revenue or 0), 2),
        "active_leads": active_leads,
        "completed_jobs_this_month": completed_jobs_this_month,
        "pending_bookings": pending_bookings,
    }


def get_debug_info(db: Session, *, database_configured: bool) -> dict:
    counts = {
        "clients": db.query(Client).count(),
        "leads": db.query(Lead).count(),
        "jobs": db.query(Job).count(),
        "bookings": db.query(Booking).count(),
        "messages": db.query(Message).count(),
        "services": db.query(Service).count(),
    }
    return {"database_url": "SET" if database_configured else "NOT_SET", "table_counts": counts}
