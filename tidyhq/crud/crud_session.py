"""Server-side session store."""

import secrets
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import Session

from tidyhq.core.time import ensure_utc, utc_now
from tidyhq.models.user_session import UserSession


class CRUDUserSession:
    def get_active(self, db: Session, sid: str) -> Optional[UserSession]:
        record = db.get(UserSession, sid)
        if record is None:
            return None
        if ensure_utc(record.expires_at) <= utc_now():
            db.delete(record)
            db.commit()
            return None
        return record

    def create(self, db: Session, *, user_id: Optional[str], max_age_seconds: int) -> UserSession:
        self.purge_expired(db)
        record = UserSession(
            sid=secrets.token_urlsafe(32),
            user_id=user_id,
            expires_at=utc_now() + timedelta(seconds=max_age_seconds),
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    def purge_expired(self, db: Session) -> int:
        """Delete every expired session without committing; return how many went."""
        return db.query(UserSession).filter(UserSession.expires_at <= utc_now()).delete(synchronize_session=False)

    def bind_user(self, db: Session, *, record: UserSession, user_id: str) -> UserSession:
        record.user_id = user_id
        db.commit()
        db.refresh(record)
        return record

    def delete(self, db: Session, sid: str) -> bool:
        deleted = db.query(UserSession).filter(UserSession.sid == sid).delete()
        db.commit()
        return deleted > 0


session_crud = CRUDUserSession()
