from wallet_api.models.wallet import Wallet

__all__ = [
    "Wallet",
]
