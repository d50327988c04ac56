"""
Schemas
File: transaction.py

Purpose: Transaction payloads stored at the leaves of a Merkle tree.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from ledger.crypto.keys import StakingWallet


class Transaction(BaseModel):
    """
    A transfer between two wallets.

    Wallet ids are hex-encoded public keys. The leaf hash of a
    transaction is the SHA-256 of its canonical JSON, so every field
    participates in tree membership.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_wallet_id: str = Field(..., min_length=1, description="Hex id of the paying wallet")
    destination_wallet_id: str = Field(..., min_length=1, description="Hex id of the receiving wallet")
    amount: Decimal = Field(..., ge=0)
    tip: Decimal = Field(default=Decimal("0"), ge=0)
    signature: str = Field(default="", description="Hex signature over the transfer")

    def hash(self) -> str:
        """Leaf hash of this transaction."""
        from ledger.crypto.hashing import hash_leaf

        return hash_leaf(self)


class StakingTransaction(Transaction):
    """A transaction whose destination is the locked staking wallet."""

    @classmethod
    def create(
        cls,
        source_wallet_id: str,
        amount: Decimal,
        tip: Decimal,
        signature: str,
        staking_wallet: StakingWallet,
    ) -> StakingTransaction:
        """
        Build a staking transaction towards the given staking wallet.

        The staking wallet is passed in rather than looked up, so callers
        decide where it is loaded from.
        """
        return cls(
            source_wallet_id=source_wallet_id,
            destination_wallet_id=staking_wallet.wallet_id,
            amount=amount,
            tip=tip,
            signature=signature,
        )

    def is_for(self, staking_wallet: StakingWallet) -> bool:
        return self.destination_wallet_id == staking_wallet.wallet_id
