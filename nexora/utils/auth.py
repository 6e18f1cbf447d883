"""
Bearer-token authentication.

``TokenService`` signs and checks identity tokens with the server secret;
``get_current_user`` is the dependency protected routes declare to obtain the
caller's ``Identity``.
"""

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from nexora.errors import InvalidToken, Unauthenticated
from nexora.logging_config import get_logger

logger = get_logger("auth")

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user) -> "Identity":
        return cls(id=str(user.id), name=user.name, email=user.email)


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256",
                 expires_in: timedelta = timedelta(days=7)):
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, identity: Identity, issued_at: Optional[datetime] = None) -> str:
        issued_at = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": identity.id,
            "name": identity.name,
            "email": identity.email,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        """
        Return the identity embedded in ``token``.

        Raises ``InvalidToken`` when the signature does not match, the token is
        malformed, or it was issued more than ``expires_in`` ago. The claims are
        trusted as signed; the user record is not consulted.
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc

        issued_at = claims.get("iat")
        if not isinstance(issued_at, int) or issued_at + self.expires_in.total_seconds() <= time.time():
            raise InvalidToken("token issued outside the validity window")

        try:
            return Identity(id=claims["sub"], name=claims["name"], email=claims["email"])
        except KeyError as exc:
            raise InvalidToken(f"missing claim {exc}") from exc


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


def create_access_token(user, tokens: TokenService) -> str:
    return tokens.issue(Identity.from_user(user))


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> Identity:
    """Dependency that validates the bearer token and returns the caller's identity."""
    if credentials is None:
        raise Unauthenticated("No token")

    try:
        identity = tokens.verify(credentials.credentials)
    except InvalidToken as exc:
        logger.warning("Rejected bearer token: %s", exc, extra={"action": "authenticate", "resource": "auth"})
        raise Unauthenticated("Invalid token") from exc

    request.state.identity = identity
    return identity
