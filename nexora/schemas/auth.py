from pydantic import BaseModel
from typing import Optional

from nexora.schemas.user import UserOut


class RegisterRequest(BaseModel):
    name: str
    # Stored exactly as sent; login looks the same string up again.
    email: str
    password: str
    position: Optional[str] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthResponse(BaseModel):
    user: UserOut
    token: str
