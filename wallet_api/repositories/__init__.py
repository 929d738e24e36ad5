from wallet_api.repositories.storer import Storer
from wallet_api.repositories.wallet_repository import SqlWalletStore

__all__ = [
    "Storer",
    "SqlWalletStore",
]
