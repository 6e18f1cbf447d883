from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexora.db.dependency import get_db
from nexora.models.user import User
from nexora.schemas.user import UserOut
from nexora.utils.auth import Identity, get_current_user

router = APIRouter()


@router.get("", response_model=List[UserOut])
def list_users(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    """Every registered member, newest first. Password hashes are never part of ``UserOut``."""
    return db.query(User).order_by(User.created_at.desc()).all()
