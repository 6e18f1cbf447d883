from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nexora.db.dependency import get_db, get_settings
from nexora.errors import ValidationFailure
from nexora.logging_config import get_logger, log_action
from nexora.models.user import User
from nexora.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from nexora.schemas.user import UserOut
from nexora.settings import Settings
from nexora.utils.auth import TokenService, create_access_token, get_token_service
from nexora.utils.crypto import verify_password

router = APIRouter()
logger = get_logger("routes.auth")

DUPLICATE_EMAIL = "Email already exists"
INVALID_CREDENTIALS = "Invalid credentials"


def _auth_response(user: User, tokens: TokenService) -> AuthResponse:
    return AuthResponse(user=UserOut.model_validate(user), token=create_access_token(user, tokens))


@router.post("/register", response_model=AuthResponse)
def register_user(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    tokens: TokenService = Depends(get_token_service),
):
    if db.query(User).filter_by(email=payload.email).first():
        raise ValidationFailure(DUPLICATE_EMAIL)

    user = User(name=payload.name, email=payload.email, position=payload.position or "Member")
    user.set_password(payload.password, settings.bcrypt_rounds)

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email.
        db.rollback()
        raise ValidationFailure(DUPLICATE_EMAIL)
    db.refresh(user)

    log_action(logger, "info", "User registered", user_id=user.id, action="register", resource="auth")
    return _auth_response(user, tokens)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    user = db.query(User).filter(User.email == payload.email).first()
    if not user or not verify_password(payload.password, user.password_hash):
        log_action(logger, "warning", "Login rejected", action="login_failed", resource="auth")
        raise ValidationFailure(INVALID_CREDENTIALS)

    log_action(logger, "info", "User logged in", user_id=user.id, action="login", resource="auth")
    return _auth_response(user, tokens)
