"""Registration, login, logout and current-user endpoints (cookie sessions)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tidyhq.core.errors import Unauthorized, ValidationFailed
from tidyhq.core.rate_limit import limit_attempts
from tidyhq.core.security import verify_password
from tidyhq.crud.crud_user import user_crud
from tidyhq.db.session import get_db
from tidyhq.dependencies.auth import SessionContext, get_session_context, require_user
from tidyhq.models.user import User
from tidyhq.schemas.user import LoginRequest, LogoutResponse, RegisterRequest, UserRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["auth"])

INVALID_CREDENTIALS = "Invalid username or password"


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(limit_attempts("register"))],
)
def register(
    user_in: RegisterRequest,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context),
):
    if user_crud.get_by_username(db, user_in.username):
        raise ValidationFailed.for_field("username", "Username already exists")
    if user_crud.get_by_email(db, str(user_in.email)):
        raise ValidationFailed.for_field("email", "Email already registered")
    try:
        user = user_crud.create(db, obj_in=user_in)
    except IntegrityError:
        # Lost a race with a concurrent registration for the same username/email
        db.rollback()
        raise ValidationFailed.for_field("username", "Username already exists")

    session.regenerate()
    session.bind(user)
    logger.info("Registered user %s (%s)", user.id, user.username)
    return user


@router.post("/login", response_model=UserRead, dependencies=[Depends(limit_attempts("login"))])
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    session: SessionContext = Depends(get_session_context),
):
    user = user_crud.get_by_username(db, credentials.username)
    if user is None or not verify_password(credentials.password, user.password):
        raise Unauthorized(INVALID_CREDENTIALS)

    session.regenerate()
    session.bind(user)
    logger.info("User %s (%s) logged in", user.id, user.username)
    return user


@router.post("/logout", response_model=LogoutResponse)
def logout(session: SessionContext = Depends(get_session_context)):
    user = session.user
    session.destroy()
    if user is not None:
        logger.info("User %s logged out", user.id)
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=UserRead)
def read_current_user(current_user: User = Depends(require_user)):
    return current_user
