"""Dashboard and diagnostics endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tidyhq.core.settings import Settings
from tidyhq.db.session import get_app_settings, get_db
from tidyhq.dependencies.auth import require_user
from tidyhq.schemas.dashboard import DashboardStats, DebugInfo
from tidyhq.services.dashboard_service import get_dashboard_stats, get_debug_info

router = APIRouter(prefix="/api", tags=["dashboard"], dependencies=[Depends(require_user)])


@router.get("/dashboard/stats", response_model=DashboardStats)
def read_dashboard_stats(db: Session = Depends(get_db)):
    return get_dashboard_stats(db)


@router.get("/debug/db-info", response_model=DebugInfo)
def read_debug_info(db: Session = Depends(get_db), settings: Settings = Depends(get_app_settings)):
    return get_debug_info(db, database_configured=bool(settings.database_url))
