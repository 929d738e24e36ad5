from wallet_api.schemas.wallet_schema import (
    WalletRequest,
    Wallet,
    ErrorResponse,
)



__all__ = [
    "WalletRequest",
    "Wallet",
    "ErrorResponse",
]
