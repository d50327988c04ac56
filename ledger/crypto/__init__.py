"""
Core cryptographic utilities.

Hashing primitives for Merkle trees, plus public key loading for
wallet identities.
"""
from .hashing import (
    sha256_hex,
    hash_text,
    hash_canonical,
    hash_leaf,
    combine,
)
from .keys import (
    load_public_key,
    public_key_id,
    StakingWallet,
)

__all__ = [
    "sha256_hex",
    "hash_text",
    "hash_canonical",
    "hash_leaf",
    "combine",
    "load_public_key",
    "public_key_id",
    "StakingWallet",
]
