"""Persistence for staff users."""

from typing import List, Optional

from sqlalchemy.orm import Session

from tidyhq.core.errors import ValidationFailed
from tidyhq.core.security import get_password_hash
from tidyhq.models.user import DEFAULT_ROLE, User
from tidyhq.schemas.user import RegisterRequest


class CRUDUser:
    def get(self, db: Session, id: str) -> Optional[User]:
        return db.get(User, id)

    def get_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email).first()

    def get_multi(self, db: Session) -> List[User]:
        return db.query(User).order_by(User.created_at.desc()).all()

    def create(self, db: Session, *, obj_in: RegisterRequest) -> User:
        # Role is fixed server-side; public registration never grants privileges
        user = User(
            username=obj_in.username,
            email=str(obj_in.email),
            first_name=obj_in.first_name,
            last_name=obj_in.last_name,
            password=get_password_hash(obj_in.password),
            role=DEFAULT_ROLE,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user


user_crud = CRUDUser()


def ensure_user_exists(db: Session, user_id: Optional[str], field: str) -> None:
    """Reject writes that name a user who does not exist."""
    if user_id is not None and user_crud.get(db, user_id) is None:
        raise ValidationFailed.for_field(field, "User not found")
