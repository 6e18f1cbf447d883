from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from nexora.db.dependency import get_db
from nexora.db.ownership import OwnedRepository
from nexora.logging_config import get_logger, log_action
from nexora.models.bank import Bank
from nexora.schemas.bank import BankCreate, BankOut, BankUpdate
from nexora.schemas.base import SuccessResponse
from nexora.utils.auth import Identity, get_current_user

router = APIRouter()
logger = get_logger("routes.banks")


def get_banks(
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
) -> OwnedRepository:
    return OwnedRepository(db, Bank, current_user)


@router.get("", response_model=List[BankOut])
def list_banks(repo: OwnedRepository = Depends(get_banks)):
    return repo.list()


@router.post("", response_model=BankOut)
def create_bank(payload: BankCreate, repo: OwnedRepository = Depends(get_banks)):
    # Card numbers are kept verbatim; nothing here masks them.
    bank = repo.create(payload.model_dump(mode="json"))
    log_action(logger, "info", "Bank card added", user_id=repo.caller.id, action="create", resource=bank.id)
    return bank


@router.put("/{bank_id}", response_model=SuccessResponse)
def update_bank(bank_id: str, payload: BankUpdate, repo: OwnedRepository = Depends(get_banks)):
    repo.update(bank_id, payload.model_dump(mode="json", exclude_unset=True, exclude_none=True))
    log_action(logger, "info", "Bank card updated", user_id=repo.caller.id, action="update", resource=bank_id)
    return SuccessResponse()


@router.delete("/{bank_id}", response_model=SuccessResponse)
def delete_bank(bank_id: str, repo: OwnedRepository = Depends(get_banks)):
    repo.delete(bank_id)
    log_action(logger, "info", "Bank card deleted", user_id=repo.caller.id, action="delete", resource=bank_id)
    return SuccessResponse()
