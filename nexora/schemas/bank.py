from enum import Enum
from typing import Optional

from nexora.schemas.base import CamelModel


class CardType(str, Enum):
    debit = "DEBIT"
    credit = "CREDIT"


class BankBase(CamelModel):
    bank_name: str
    holder_name: str
    card_number: str
    expiry_date: str
    card_type: CardType


class BankCreate(BankBase):
    pass


class BankUpdate(CamelModel):
    bank_name: Optional[str] = None
    holder_name: Optional[str] = None
    card_number: Optional[str] = None
    expiry_date: Optional[str] = None
    card_type: Optional[CardType] = None


class BankOut(BankBase):
    id: str
    user_id: str
