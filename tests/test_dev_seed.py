import pytest

from tidyhq.core import dev_seed
from tidyhq.core.dev_seed import (
    CLIENTS,
    DEFAULT_DEV_USERNAME,
    SERVICES,
    ensure_default_dev_user,
    seed_dev_data,
)
from tidyhq.core.security import verify_password
from tidyhq.main import app
from tidyhq.models.client import Client
from tidyhq.models.job import Job
from tidyhq.models.service import Service
from tidyhq.models.user import User


@pytest.fixture(autouse=True)
def setup_db():
    database = app.state.database
    database.drop_all()
    database.create_all()
    yield
    database.drop_all()


def test_seeding_is_skipped_under_pytest():
    with app.state.database.session() as db:
        ensure_default_dev_user(db)
        assert seed_dev_data(db) is False
        assert db.query(User).count() == 0
        assert db.query(Client).count() == 0


def test_seed_populates_empty_database_once(monkeypatch):
    monkeypatch.setattr(dev_seed, "_running_under_pytest", lambda: False)
    with app.state.database.session() as db:
        assert seed_dev_data(db) is True
        assert db.query(Service).count() == len(SERVICES)
        assert db.query(Client).count() == len(CLIENTS)
        completed = db.query(Job).filter(Job.status == "completed").one()
        assert completed.completed_at is not None

        assert seed_dev_data(db) is False
        assert db.query(Client).count() == len(CLIENTS)


def test_default_dev_user_is_created_once(monkeypatch):
    monkeypatch.setattr(dev_seed, "_running_under_pytest", lambda: False)
    with app.state.database.session() as db:
        ensure_default_dev_user(db)
        ensure_default_dev_user(db)
        users = db.query(User).filter(User.username == DEFAULT_DEV_USERNAME).all()
        assert len(users) == 1
        assert users[0].role == "staff"
        assert verify_password("Secret123!", users[0].password)
