"""
Common factory functions for building test data.
"""

from decimal import Decimal
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from ledger.schemas.transaction import Transaction


def make_transaction(i: int = 0, amount: str = "10") -> Transaction:
    """A transaction that differs from every other index by its source wallet."""
    return Transaction(
        source_wallet_id=f"{i:04x}" * 8,
        destination_wallet_id="beef" * 8,
        amount=Decimal(amount),
        tip=Decimal("0.1"),
        signature=f"sig{i:04d}",
    )


def make_transactions(n: int) -> list[Transaction]:
    return [make_transaction(i) for i in range(n)]


def write_public_key(path: Path, pem: bool = False) -> Path:
    """Generate a fresh Ed25519 key and write its public half to path."""
    public_key = ed25519.Ed25519PrivateKey.generate().public_key()
    encoding = serialization.Encoding.PEM if pem else serialization.Encoding.DER
    path.write_bytes(
        public_key.public_bytes(
            encoding=encoding,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    )
    return path
