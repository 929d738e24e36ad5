"""Storage contract the HTTP handlers depend on."""

from __future__ import annotations

from typing import Protocol, Sequence

from wallet_api.schemas import Wallet, WalletRequest


class Storer(Protocol):
    def wallets(self) -> Sequence[Wallet]:
        ...

    def wallets_by_user(self, user_id: str) -> Sequence[Wallet]:
        ...

    def wallets_by_type(self, wallet_type: str) -> Sequence[Wallet]:
        ...

    def create_wallet(self, wallet: WalletRequest) -> Wallet:
        ...

    def update_wallet(self, wallet: WalletRequest, wallet_id: str) -> Wallet:
        ...

    def delete_wallet(self, wallet_id: str) -> None:
        ...
