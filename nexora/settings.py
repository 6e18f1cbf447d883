import os
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv


def build_db_url() -> Optional[str]:
    url = os.getenv("DATABASE_URL") or os.getenv("DB_URL")
    if url:
        return url

    user = os.getenv("DB_USER")
    pwd = os.getenv("DB_PASSWORD")
    host = os.getenv("DB_HOST")
    port = os.getenv("DB_PORT", "5432")
    name = os.getenv("DB_NAME")

    if not all([user, pwd, host, name]):
        return None

    return f"postgresql+psycopg2://{user}:{quote_plus(pwd)}@{host}:{port}/{name}"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Process-wide configuration handed to ``create_app``."""

    jwt_secret: str
    database_url: str = "sqlite:///./nexora.db"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    bcrypt_rounds: int = 10
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 4000

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, loading ``.env`` first.

        ``JWT_SECRET`` has no default: a server without a signing secret
        refuses to start.
        """
        load_dotenv()

        secret = os.getenv("JWT_SECRET")
        if not secret:
            raise RuntimeError("JWT_SECRET is not set")

        return cls(
            jwt_secret=secret,
            database_url=build_db_url() or cls.database_url,
            jwt_expires_days=int(os.getenv("JWT_EXPIRES_DAYS", "7")),
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", "10")),
            cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "4000")),
        )
