from wallet_api.controllers.wallet_controller import router as wallet_router
from wallet_api.controllers.user_controller import router as user_router

__all__ = [
    "wallet_router",
    "user_router",
]
