"""
Owner-scoped data access.

Transactions and bank records are only ever read or written through an
``OwnedRepository``; every statement it builds is filtered on
``user_id == caller.id``. Ids that do not exist or belong to someone else are
silently left alone, so callers never learn whether a foreign id exists.
"""

from typing import Any, Dict, Iterable, List

from sqlalchemy.orm import Session

from nexora.utils.auth import Identity

OWNER_FIELDS = ("id", "user_id", "user_name")


class OwnedRepository:
    def __init__(self, db: Session, model, caller: Identity):
        self.db = db
        self.model = model
        self.caller = caller

    def query(self):
        return self.db.query(self.model).filter(self.model.user_id == self.caller.id)

    def list(self, *order_by) -> List[Any]:
        return self.query().order_by(*order_by).all()

    def create(self, values: Dict[str, Any], **owner_fields) -> Any:
        values = _strip_owner_fields(values)
        record = self.model(**values, **owner_fields, user_id=self.caller.id)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def update(self, record_id: str, values: Dict[str, Any]) -> int:
        return self.update_many([record_id], values)

    def update_many(self, record_ids: Iterable[str], values: Dict[str, Any]) -> int:
        values = _strip_owner_fields(values)
        if not values:
            return 0
        count = (
            self.query()
            .filter(self.model.id.in_(list(record_ids)))
            .update(values, synchronize_session=False)
        )
        self.db.commit()
        return count

    def delete(self, record_id: str) -> int:
        return self.delete_many([record_id])

    def delete_many(self, record_ids: Iterable[str]) -> int:
        count = (
            self.query()
            .filter(self.model.id.in_(list(record_ids)))
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return count


def _strip_owner_fields(values: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in values.items() if k not in OWNER_FIELDS}
