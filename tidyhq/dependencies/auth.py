"""Request-scoped session capability and the authentication guard for protected routes."""

from typing import Optional

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from tidyhq.core.errors import Unauthorized
from tidyhq.core.security import sign_session_id, unsign_session_id
from tidyhq.core.settings import Settings
from tidyhq.crud.crud_session import session_crud
from tidyhq.crud.crud_user import user_crud
from tidyhq.db.session import get_app_settings, get_db
from tidyhq.models.user import User
from tidyhq.models.user_session import UserSession

NOT_AUTHENTICATED = "Not authenticated"


class SessionContext:
    """The caller's session, handed to handlers that need to read or change who is signed in.

    Anonymous callers have no stored session. `regenerate()` always issues a new
    session id, discarding the old one, so a login never reuses an identifier
    that existed before authentication.
    """

    def __init__(self, db: Session, response: Response, settings: Settings, record: Optional[UserSession]):
        self._db = db
        self._response = response
        self._settings = settings
        self._record = record

    @property
    def sid(self) -> Optional[str]:
        return self._record.sid if self._record else None

    @property
    def user(self) -> Optional[User]:
        if self._record is None or self._record.user_id is None:
            return None
        return user_crud.get(self._db, self._record.user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def regenerate(self) -> None:
        if self._record is not None:
            session_crud.delete(self._db, self._record.sid)
        self._record = session_crud.create(
            self._db, user_id=None, max_age_seconds=self._settings.session_max_age_seconds
        )
        self._set_cookie()

    def bind(self, user: User) -> None:
        if self._record is None:
            self.regenerate()
        self._record = session_crud.bind_user(self._db, record=self._record, user_id=user.id)

    def destroy(self) -> None:
        if self._record is not None:
            session_crud.delete(self._db, self._record.sid)
            self._record = None
        self._response.delete_cookie(
            self._settings.session_cookie_name,
            httponly=True,
            samesite="lax",
            secure=self._settings.is_production,
        )

    def _set_cookie(self) -> None:
        self._response.set_cookie(
            self._settings.session_cookie_name,
            sign_session_id(self._record.sid, self._settings.secret_key),
            max_age=self._settings.session_max_age_seconds,
            httponly=True,
            samesite="lax",
            secure=self._settings.is_production,
        )


def get_session_context(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> SessionContext:
    record = None
    cookie = request.cookies.get(settings.session_cookie_name)
    if cookie:
        sid = unsign_session_id(cookie, settings.secret_key, max_age=settings.session_max_age_seconds)
        if sid:
            record = session_crud.get_active(db, sid)
    return SessionContext(db, response, settings, record)


def require_user(session: SessionContext = Depends(get_session_context)) -> User:
    user = session.user
    if user is None:
        raise Unauthorized(NOT_AUTHENTICATED)
    return user
