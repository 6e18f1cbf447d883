from datetime import datetime, timezone

from sqlalchemy import Column, String, Float, JSON
from nexora.db.base import Base, new_id


def _created_at() -> str:
    return datetime.now(timezone.utc).isoformat()


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), nullable=False, index=True)
    user_name = Column(String, nullable=False)
    date = Column(String, nullable=False)
    type = Column(String, nullable=False)
    category = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    payment_method = Column(String, nullable=False)
    bank_account_id = Column(String, nullable=True)
    bank_name = Column(String, nullable=True)
    description = Column(String, nullable=True, default="")
    attachment = Column(String, nullable=True)
    investment_type = Column(String, nullable=False, default="SINGLE")
    investors = Column(JSON, nullable=False, default=list)
    created_at = Column(String, nullable=False, default=_created_at)
