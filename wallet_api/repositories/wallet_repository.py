import logging
from sqlalchemy.orm import Session
from typing import List

from wallet_api.models import Wallet as WalletModel
from wallet_api.schemas import Wallet, WalletRequest
from wallet_api.repositories.utils import db_transaction, parse_id, commit_and_refresh

logger = logging.getLogger(__name__)


class SqlWalletStore:
    """Storer backed by the ``user_wallet`` table.

    Every operation issues one statement for its work and commits writes
    before returning. Engine failures are rolled back and surface as
    ``StoreError``.
    """

    def __init__(self, db: Session):
        self.db = db

    @db_transaction
    def wallets(self) -> List[Wallet]:
        rows = self.db.query(WalletModel).all()
        return [Wallet.model_validate(w) for w in rows]

    @db_transaction
    def wallets_by_user(self, user_id: str) -> List[Wallet]:
        uid = parse_id(user_id, "user id")
        rows = self.db.query(WalletModel).filter(WalletModel.user_id == uid).all()
        return [Wallet.model_validate(w) for w in rows]

    @db_transaction
    def wallets_by_type(self, wallet_type: str) -> List[Wallet]:
        rows = self.db.query(WalletModel).filter(WalletModel.wallet_type == wallet_type).all()
        return [Wallet.model_validate(w) for w in rows]

    @db_transaction
    def create_wallet(self, wallet: WalletRequest) -> Wallet:
        row = WalletModel(
            user_id=wallet.user_id,
            user_name=wallet.user_name,
            wallet_name=wallet.wallet_name,
            wallet_type=wallet.wallet_type,
            balance=wallet.balance,
        )
        self.db.add(row)
        self.db.flush()

        commit_and_refresh(self.db, row)
        logger.info(f"Wallet created: {row.id} for user {row.user_id}")
        return Wallet.model_validate(row)

    @db_transaction
    def update_wallet(self, wallet: WalletRequest, wallet_id: str) -> Wallet:
        pk = parse_id(wallet_id, "wallet id")
        result = self.db.query(WalletModel).filter(WalletModel.id == pk).update(
            {
                "user_id": wallet.user_id,
                "user_name": wallet.user_name,
                "wallet_name": wallet.wallet_name,
                "wallet_type": wallet.wallet_type,
                "balance": wallet.balance,
            },
            synchronize_session=False
        )
        self.db.commit()

        row = self.db.get(WalletModel, pk) if result else None
        if row is None:
            # Nothing matched; report the submitted values as-is
            logger.info(f"Update matched no wallet with id {pk}")
            return Wallet(id=pk, **wallet.model_dump())

        logger.info(f"Wallet updated: {pk}")
        return Wallet.model_validate(row)

    @db_transaction
    def delete_wallet(self, wallet_id: str) -> None:
        pk = parse_id(wallet_id, "wallet id")
        result = self.db.query(WalletModel).filter(WalletModel.id == pk).delete(
            synchronize_session=False
        )
        self.db.commit()

        if result:
            logger.info(f"Wallet deleted: {pk}")
        else:
            logger.info(f"Delete matched no wallet with id {pk}")
