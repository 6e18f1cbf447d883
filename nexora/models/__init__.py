from .user import User
from .transaction import Transaction
from .bank import Bank

__all__ = ["User", "Transaction", "Bank"]
