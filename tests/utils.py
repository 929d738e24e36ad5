from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi.testclient import TestClient

from wallet_api.exceptions import StoreError
from wallet_api.schemas import Wallet, WalletRequest


WALLETS_URL = "/api/v1/wallets"


def user_wallets_url(user_id) -> str:
    return f"/api/v1/users/{user_id}/wallets"


@dataclass
class StubStore:
    """Storer returning canned values, recording the arguments it was given."""
    all_wallets: List[Wallet] = field(default_factory=list)
    user_wallets: List[Wallet] = field(default_factory=list)
    type_wallets: List[Wallet] = field(default_factory=list)
    created: Optional[Wallet] = None
    updated: Optional[Wallet] = None
    err: Optional[StoreError] = None
    calls: List[tuple] = field(default_factory=list)

    def _check(self, *call):
        self.calls.append(call)
        if self.err is not None:
            raise self.err

    def wallets(self) -> List[Wallet]:
        self._check("wallets")
        return self.all_wallets

    def wallets_by_user(self, user_id: str) -> List[Wallet]:
        self._check("wallets_by_user", user_id)
        return self.user_wallets

    def wallets_by_type(self, wallet_type: str) -> List[Wallet]:
        self._check("wallets_by_type", wallet_type)
        return self.type_wallets

    def create_wallet(self, wallet: WalletRequest) -> Wallet:
        self._check("create_wallet", wallet)
        return self.created

    def update_wallet(self, wallet: WalletRequest, wallet_id: str) -> Wallet:
        self._check("update_wallet", wallet, wallet_id)
        return self.updated

    def delete_wallet(self, wallet_id: str) -> None:
        self._check("delete_wallet", wallet_id)


def wallet_payload(
    user_id: int = 1,
    user_name: str = "John Doe",
    wallet_name: str = "John Savings",
    wallet_type: str = "Savings",
    balance: float = 1000,
) -> Dict:
    return {
        "user_id": user_id,
        "user_name": user_name,
        "wallet_name": wallet_name,
        "wallet_type": wallet_type,
        "balance": balance,
    }

def create_test_wallet(client: TestClient, **overrides) -> Dict:
    response = client.post(WALLETS_URL, json=wallet_payload(**overrides))
    assert response.status_code == 201, f"Failed to create wallet: {response.text}"
    return response.json()
