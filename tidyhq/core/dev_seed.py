import logging
import os
from datetime import timedelta
from decimal import Decimal

from sqlalchemy.orm import Session

from tidyhq.core.security import get_password_hash
from tidyhq.core.time import utc_now
from tidyhq.models.booking import Booking
from tidyhq.models.client import Client
from tidyhq.models.job import Job
from tidyhq.models.lead import Lead
from tidyhq.models.message import Message
from tidyhq.models.service import Service
from tidyhq.models.user import DEFAULT_ROLE, User

logger = logging.getLogger(__name__)

DEFAULT_DEV_USERNAME = "demo"
DEFAULT_DEV_EMAIL = "demo@example.com"
DEFAULT_DEV_PASSWORD = "Secret123!"

SERVICES = [
    ("Regular Cleaning", "Standard house cleaning service", "120.00", 120),
    ("Deep Cleaning", "Thorough deep cleaning service", "250.00", 240),
    ("Move-out Cleaning", "Complete cleaning for move-out", "300.00", 300),
    ("Office Cleaning", "Commercial office cleaning", "180.00", 180),
]

CLIENTS = [
    ("Sarah Johnson", "sarah@example.com", "(555) 123-4567", "123 Oak Street, Downtown", ["VIP", "Recurring"],
     "Prefers morning appointments. Has two cats."),
    ("Mike Chen", "mike@example.com", "(555) 234-5678", "456 Pine Avenue, Midtown", ["Pet Owner"],
     "Has a dog that needs to be contained during service."),
    ("Emma Davis", "emma@example.com", "(555) 345-6789", "789 Elm Drive, Suburbs", ["New Client"],
     "New client, very particular about eco-friendly products."),
]

LEADS = [
    ("Jennifer Williams", "jennifer@example.com", "(555) 678-9012", "Deep Cleaning", "Website", "new", "275.00",
     "Interested in monthly deep cleaning service."),
    ("Robert Taylor", "robert@example.com", "(555) 789-0123", "Regular Cleaning", "Referral", "contacted", "150.00",
     "Referred by Sarah Johnson. Needs weekly service."),
]


def _running_under_pytest() -> bool:
    return bool(os.getenv("PYTEST_CURRENT_TEST"))


def ensure_default_dev_user(db: Session) -> None:
    """
    Create a login for local development if it does not exist.
    Skips execution when running under pytest to avoid altering test expectations.
    """
    if _running_under_pytest():
        return

    existing = db.query(User).filter(User.username == DEFAULT_DEV_USERNAME).first()
    if existing:
        return

    db.add(
        User(
            username=DEFAULT_DEV_USERNAME,
            email=DEFAULT_DEV_EMAIL,
            password=get_password_hash(DEFAULT_DEV_PASSWORD),
            first_name="Demo",
            last_name="User",
            role=DEFAULT_ROLE,
        )
    )
    db.commit()
    logger.info("Created development user %s", DEFAULT_DEV_USERNAME)


def seed_dev_data(db: Session) -> bool:
    """Populate an empty database with sample records. Returns False when there was data already."""
    if _running_under_pytest():
        return False
    if db.query(Client).first() is not None or db.query(Service).first() is not None:
        logger.info("Database already has data, skipping sample records")
        return False

    now = utc_now()
    for name, description, price, duration in SERVICES:
        db.add(Service(name=name, description=description, base_price=Decimal(price), estimated_duration=duration))

    clients = []
    for name, email, phone, address, tags, notes in CLIENTS:
        client = Client(name=name, email=email, phone=phone, address=address, tags=tags, notes=notes)
        db.add(client)
        clients.append(client)

    for name, email, phone, service, source, status, value, notes in LEADS:
        db.add(
            Lead(
                name=name, email=email, phone=phone, service=service, source=source,
                status=status, value=Decimal(value), notes=notes,
            )
        )
    db.flush()

    sarah, mike, emma = clients
    db.add(
        Job(
            client_id=sarah.id,
            service="Regular Cleaning",
            description="Weekly house cleaning",
            address=sarah.address,
            scheduled_date=now - timedelta(days=3),
            scheduled_time="09:00",
            estimated_duration=120,
            status="completed",
            cost=Decimal("120.00"),
            completed_at=now - timedelta(days=3),
        )
    )
    db.add(
        Job(
            client_id=mike.id,
            service="Deep Cleaning",
            address=mike.address,
            scheduled_date=now + timedelta(days=2),
            scheduled_time="13:00",
            estimated_duration=240,
            cost=Decimal("250.00"),
        )
    )
    db.add(
        Booking(
            client_id=emma.id,
            service="Regular Cleaning",
            date=now + timedelta(days=5),
            time="10:00",
            duration=120,
            address=emma.address,
            phone=emma.phone,
            estimated_cost=Decimal("120.00"),
        )
    )
    db.add(
        Message(
            client_id=sarah.id,
            type="sms",
            direction="inbound",
            content="Can we move next week's cleaning to Thursday?",
            status="delivered",
        )
    )
    db.commit()
    logger.info("Seeded %d services, %d clients and %d leads", len(SERVICES), len(CLIENTS), len(LEADS))
    return True


def main() -> None:
    from tidyhq.core.settings import get_settings
    from tidyhq.db.session import Database

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    database = Database.from_settings(settings)
    database.create_all()
    with database.session() as db:
        ensure_default_dev_user(db)
        seed_dev_data(db)
    database.dispose()


if __name__ == "__main__":
    main()
