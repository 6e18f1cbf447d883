from datetime import datetime

from nexora.schemas.base import CamelModel


class UserOut(CamelModel):
    id: str
    name: str
    email: str
    position: str
    created_at: datetime
