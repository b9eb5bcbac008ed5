from tidyhq.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all
from tidyhq.models.user import User  # noqa: F401
from tidyhq.models.user_session import UserSession  # noqa: F401
from tidyhq.models.client import Client  # noqa: F401
from tidyhq.models.lead import Lead  # noqa: F401
from tidyhq.models.job import Job  # noqa: F401
from tidyhq.models.booking import Booking  # noqa: F401
from tidyhq.models.message import Message  # noqa: F401
from tidyhq.models.service import Service  # noqa: F401
from tidyhq.models.property import Property  # noqa: F401
from tidyhq.models.contact_activity import ContactActivity  # noqa: F401
from tidyhq.models.follow_up import FollowUp  # noqa: F401
