from wallet_api.database import get_db
from wallet_api.repositories import Storer, SqlWalletStore
from sqlalchemy.orm import Session
from typing import Annotated
from fastapi import Depends


def get_wallet_store(db: Annotated[Session, Depends(get_db)]) -> Storer:
    return SqlWalletStore(db)
