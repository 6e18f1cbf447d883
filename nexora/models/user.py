from datetime import datetime, timezone

from sqlalchemy import Column, String, DateTime
from nexora.db.base import Base, new_id
from nexora.utils.crypto import DEFAULT_ROUNDS, hash_password


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    # The unique index is what keeps concurrent registrations from sharing an email.
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    position = Column(String, nullable=False, default="Member")
    created_at = Column(DateTime, nullable=False, default=_utcnow)

    def set_password(self, password: str, rounds: int = DEFAULT_ROUNDS):
        """Hash and set the user's password."""
        self.password_hash = hash_password(password, rounds)
