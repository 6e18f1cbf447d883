from sqlalchemy import Column, String
from nexora.db.base import Base, new_id


class Bank(Base):
    __tablename__ = "banks"

    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), nullable=False, index=True)
    bank_name = Column(String, nullable=False)
    holder_name = Column(String, nullable=False)
    card_number = Column(String, nullable=False)
    expiry_date = Column(String, nullable=False)
    card_type = Column(String, nullable=False)
