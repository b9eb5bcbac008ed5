"""Security utilities for TidyHQ CRM: password policy, hashing and session cookie signing."""

import re
from functools import lru_cache
from typing import List, Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer
from passlib.context import CryptContext

from tidyhq.core.settings import get_settings

PASSWORD_SYMBOLS = "@$!%*?&"
MIN_PASSWORD_LENGTH = 8

_PASSWORD_RULES = [
    (re.compile(r"[a-z]"), "Password must contain at least one lowercase letter"),
    (re.compile(r"[A-Z]"), "Password must contain at least one uppercase letter"),
    (re.compile(r"\d"), "Password must contain at least one number"),
    (re.compile(f"[{re.escape(PASSWORD_SYMBOLS)}]"), f"Password must contain at least one special character ({PASSWORD_SYMBOLS})"),
]

SESSION_COOKIE_SALT = "tidyhq-session"


def password_policy_violations(password: Optional[str]) -> List[str]:
    """Return every rule the password breaks, in rule order; empty when it is acceptable."""
    password = password or ""
    problems = []
    if len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    problems.extend(message for pattern, message in _PASSWORD_RULES if not pattern.search(password))
    return problems


@lru_cache()
def _pwd_context() -> CryptContext:
    rounds = get_settings().password_hash_rounds
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def get_password_hash(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognisable hash
        return False


def _cookie_serializer(secret_key: str) -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(secret_key, salt=SESSION_COOKIE_SALT)


def sign_session_id(sid: str, secret_key: str) -> str:
    return _cookie_serializer(secret_key).dumps(sid)


def unsign_session_id(cookie_value: str, secret_key: str, max_age: int) -> Optional[str]:
    """Return the session id carried by a signed cookie, or None if it is forged or stale."""
    try:
        sid = _cookie_serializer(secret_key).loads(cookie_value, max_age=max_age)
    except SignatureExpired:
        return None
    except BadSignature:
        return None
    return sid if isinstance(sid, str) else None
