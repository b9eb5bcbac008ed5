"""Dashboard schemas."""

from tidyhq.schemas.common import CamelModel


class DashboardStats(CamelModel):
    total_clients: int
    total_jobs: int
    total_revenue: float
    active_leads: int
    completed_jobs_this_month: int
    pending_bookings: int


class TableCounts(CamelModel):
    clients: int
    leads: int
    jobs: int
    bookings: int
    messages: int
    services: int


class DebugInfo(CamelModel):
    database_url: str
    table_counts: TableCounts
