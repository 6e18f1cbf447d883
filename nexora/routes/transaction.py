from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexora.db.dependency import get_db
from nexora.db.ownership import OwnedRepository
from nexora.logging_config import get_logger, log_action
from nexora.models.transaction import Transaction
from nexora.schemas.base import SuccessResponse
from nexora.schemas.transaction import (
    BulkCategoryRequest,
    BulkDeleteRequest,
    TransactionCreate,
    TransactionOut,
    TransactionUpdate,
)
from nexora.utils.auth import Identity, get_current_user

router = APIRouter()
logger = get_logger("routes.transaction")


def get_transactions(
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
) -> OwnedRepository:
    return OwnedRepository(db, Transaction, current_user)


@router.get("", response_model=List[TransactionOut])
def list_transactions(repo: OwnedRepository = Depends(get_transactions)):
    return repo.list(Transaction.date.desc())


@router.post("", response_model=TransactionOut)
def create_transaction(payload: TransactionCreate, repo: OwnedRepository = Depends(get_transactions)):
    tx = repo.create(payload.model_dump(mode="json"), user_name=repo.caller.name)
    log_action(logger, "info", "Transaction created", user_id=repo.caller.id, action="create", resource=tx.id)
    return tx


@router.put("/{tx_id}", response_model=SuccessResponse)
def update_transaction(
    tx_id: str,
    payload: TransactionUpdate,
    repo: OwnedRepository = Depends(get_transactions),
):
    repo.update(tx_id, payload.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    log_action(logger, "info", "Transaction updated", user_id=repo.caller.id, action="update", resource=tx_id)
    return SuccessResponse()


@router.delete("/{tx_id}", response_model=SuccessResponse)
def delete_transaction(tx_id: str, repo: OwnedRepository = Depends(get_transactions)):
    repo.delete(tx_id)
    log_action(logger, "info", "Transaction deleted", user_id=repo.caller.id, action="delete", resource=tx_id)
    return SuccessResponse()


@router.post("/bulk-delete", response_model=SuccessResponse)
def bulk_delete_transactions(payload: BulkDeleteRequest, repo: OwnedRepository = Depends(get_transactions)):
    deleted = repo.delete_many(payload.ids)
    log_action(
        logger, "info", f"Bulk delete removed {deleted} of {len(payload.ids)} transactions",
        user_id=repo.caller.id, action="bulk_delete", resource="transactions",
    )
    return SuccessResponse()


@router.post("/bulk-category", response_model=SuccessResponse)
def bulk_update_category(payload: BulkCategoryRequest, repo: OwnedRepository = Depends(get_transactions)):
    updated = repo.update_many(payload.ids, {"category": payload.category})
    log_action(
        logger, "info", f"Bulk category set on {updated} of {len(payload.ids)} transactions",
        user_id=repo.caller.id, action="bulk_category", resource="transactions",
    )
    return SuccessResponse()
