"""
Key Loading
Public key loading and the staking wallet value type.

Wallets are identified by the hex encoding of their public key in
DER SubjectPublicKeyInfo form, so a key loaded from PEM and the same
key loaded from DER yield the same wallet id.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PublicKeyTypes

from ledger.schemas.errors import ConfigurationException, ErrorCodes


logger = logging.getLogger(__name__)

_PEM_MARKER = b"-----BEGIN"


def load_public_key(path: str | Path) -> PublicKeyTypes:
    """
    Load a public key from a DER or PEM file.

    Raises:
        ConfigurationException: If the file is missing or not a public key.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigurationException(
            f"Key file not found: {path}",
            code=ErrorCodes.KEY_LOAD_ERROR,
            path=str(path),
        )

    data = path.read_bytes()
    try:
        if data.lstrip().startswith(_PEM_MARKER):
            key = serialization.load_pem_public_key(data)
        else:
            key = serialization.load_der_public_key(data)
    except (ValueError, TypeError) as e:
        raise ConfigurationException(
            f"Could not parse public key from {path}: {e}",
            code=ErrorCodes.KEY_LOAD_ERROR,
            path=str(path),
        ) from e

    logger.debug(f"Loaded public key from {path}")
    return key


def public_key_id(key: PublicKeyTypes) -> str:
    """Hex wallet id of a public key (DER SubjectPublicKeyInfo)."""
    der = key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return der.hex()


@dataclass(frozen=True)
class StakingWallet:
    """
    The locked wallet that receives staking transactions.

    Constructed explicitly (usually via RuntimeConfig.load_staking_wallet)
    and handed to whatever issues staking transactions.
    """
    wallet_id: str

    @classmethod
    def from_public_key(cls, key: PublicKeyTypes) -> "StakingWallet":
        return cls(wallet_id=public_key_id(key))

    @classmethod
    def from_file(cls, path: str | Path) -> "StakingWallet":
        return cls.from_public_key(load_public_key(path))


__all__ = [
    "load_public_key",
    "public_key_id",
    "StakingWallet",
]
