from wallet_api.schemas import Wallet, ErrorResponse
from wallet_api.repositories import Storer
from typing import Annotated, List
from fastapi import APIRouter, Depends
from wallet_api.dependencies import get_wallet_store


router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/wallets", response_model=List[Wallet], responses={500: {"model": ErrorResponse}})
def get_user_wallets(user_id: str, store: Annotated[Storer, Depends(get_wallet_store)]):
    return store.wallets_by_user(user_id)


# The path segment is the wallet id, not the user id
@router.delete("/{wallet_id}/wallets", response_model=str, responses={500: {"model": ErrorResponse}})
def delete_wallet(wallet_id: str, store: Annotated[Storer, Depends(get_wallet_store)]):
    store.delete_wallet(wallet_id)
    return "Wallet deleted"
