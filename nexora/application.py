"""
Application factory for the NexoraCrew finance API.
"""

from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from nexora.db.session import Database
from nexora.errors import FinanceAPIError
from nexora.logging_config import get_logger, setup_logging
from nexora.routes import auth, banks, transaction, users
from nexora.schemas.base import PingResponse
from nexora.settings import Settings
from nexora.utils.auth import TokenService

API_PREFIX = "/api"

logger = get_logger("app")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def register_error_handlers(app: FastAPI):
    @app.exception_handler(FinanceAPIError)
    async def finance_error_handler(request: Request, exc: FinanceAPIError):
        return _error(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without explicit ``settings`` the environment is read. The database schema
    is created eagerly; a store that cannot be reached aborts startup.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)

    db = Database(settings.database_url)
    db.create_all()

    app = FastAPI(title="NexoraCrew Finance API", version="1.0.0")
    app.state.settings = settings
    app.state.db = db
    app.state.tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=timedelta(days=settings.jwt_expires_days),
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get(API_PREFIX + "/ping", response_model=PingResponse)
    def ping():
        return {"ok": True, "message": "NexoraCrew API is working"}

    app.include_router(auth.router, prefix=API_PREFIX + "/auth", tags=["Auth"])
    app.include_router(users.router, prefix=API_PREFIX + "/users", tags=["Users"])
    app.include_router(transaction.router, prefix=API_PREFIX + "/transactions", tags=["Transactions"])
    app.include_router(banks.router, prefix=API_PREFIX + "/banks", tags=["Banks"])

    logger.info("Application configured", extra={"action": "startup", "resource": settings.database_url.split(":", 1)[0]})
    return app
