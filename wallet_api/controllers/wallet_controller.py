from wallet_api.schemas import WalletRequest, Wallet, ErrorResponse
from wallet_api.repositories import Storer
from typing import Annotated, List, Optional
from fastapi import APIRouter, Depends, Query, status
from wallet_api.dependencies import get_wallet_store

router = APIRouter(prefix="/wallets", tags=["wallets"])

STORE_ERROR = {500: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


@router.get("", response_model=List[Wallet], responses=STORE_ERROR)
def get_wallets(
    store: Annotated[Storer, Depends(get_wallet_store)],
    wallet_type: Optional[str] = Query(None, description="Exact wallet type to filter on"),
):
    """List every wallet, or only those of ``wallet_type`` when it is given."""
    if wallet_type is None:
        return store.wallets()
    return store.wallets_by_type(wallet_type)


@router.get("/wallet", response_model=List[Wallet], include_in_schema=False)
def get_wallets_by_type(store: Annotated[Storer, Depends(get_wallet_store)], wallet_type: str = ""):
    return store.wallets_by_type(wallet_type)


@router.get("/user/{user_id}", response_model=List[Wallet], include_in_schema=False)
def get_wallets_by_user(user_id: str, store: Annotated[Storer, Depends(get_wallet_store)]):
    return store.wallets_by_user(user_id)


@router.post(
    "",
    response_model=Wallet,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **STORE_ERROR},
)
def create_wallet(
    request: WalletRequest,
    store: Annotated[Storer, Depends(get_wallet_store)]
):
    return store.create_wallet(request)


@router.put(
    "/{wallet_id}",
    response_model=Wallet,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **STORE_ERROR},
)
def update_wallet(
    wallet_id: str,
    request: WalletRequest,
    store: Annotated[Storer, Depends(get_wallet_store)]
):
    """Overwrite every field of the wallet. An unknown id changes nothing."""
    return store.update_wallet(request, wallet_id)
