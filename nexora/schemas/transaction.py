from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from nexora.schemas.base import CamelModel


class TransactionType(str, Enum):
    income = "INCOME"
    expense = "EXPENSE"


class InvestmentType(str, Enum):
    single = "SINGLE"
    team = "TEAM"


class TransactionBase(CamelModel):
    date: str
    type: TransactionType
    category: str
    amount: float
    payment_method: str
    bank_account_id: Optional[str] = None
    bank_name: Optional[str] = None
    description: Optional[str] = ""
    attachment: Optional[str] = None
    investment_type: InvestmentType = InvestmentType.single
    investors: List[str] = []


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(CamelModel):
    date: Optional[str] = None
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    payment_method: Optional[str] = None
    bank_account_id: Optional[str] = None
    bank_name: Optional[str] = None
    description: Optional[str] = None
    attachment: Optional[str] = None
    investment_type: Optional[InvestmentType] = None
    investors: Optional[List[str]] = None


class TransactionOut(TransactionBase):
    id: str
    user_id: str
    user_name: str
    investors: Optional[List[str]] = []
    created_at: str


class BulkDeleteRequest(BaseModel):
    ids: List[str]


class BulkCategoryRequest(BaseModel):
    ids: List[str]
    category: str
