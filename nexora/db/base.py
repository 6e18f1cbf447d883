import uuid

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Opaque primary key shared by every table."""
    return uuid.uuid4().hex
