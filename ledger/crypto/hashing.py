"""
Hashing Utilities
Digest primitives shared by tree construction and proof verification.

This module provides:
- SHA-256 hashing of raw bytes and text, as lowercase hex
- Canonical hashing for objects (via dumps_canonical)
- Leaf hashing for transactions
- Order-sensitive combination of two node hashes

Security/Determinism Notes:
- Node hashes are hex strings; parents hash the concatenated hex text
- combine(a, b) != combine(b, a); proof steps carry the side explicitly
- All operations are deterministic
"""
from __future__ import annotations

import hashlib
from typing import Any

from ledger.schemas.canonical import dumps_canonical


def sha256_hex(data: bytes) -> str:
    """
    Compute the SHA-256 digest of raw bytes as lowercase hex.

    Example:
        >>> sha256_hex(b"hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).hexdigest()


def hash_text(text: str) -> str:
    """Hash a string by its UTF-8 encoding."""
    return sha256_hex(text.encode("utf-8"))


def hash_canonical(obj: Any) -> str:
    """
    Hash an object using canonical JSON serialization.

    Rule: digest = sha256(dumps_canonical(obj).encode("utf-8"))

    Args:
        obj: Any object that can be canonically serialized
             (Pydantic model, dict, list, primitives)

    Returns:
        64-character hex digest of the canonical JSON

    Raises:
        CanonicalizationException: If object cannot be canonically serialized
    """
    return hash_text(dumps_canonical(obj))


def hash_leaf(transaction: Any) -> str:
    """
    Compute the leaf hash of a transaction.

    A plain string is treated as an opaque payload and hashed as text;
    anything else is hashed canonically. Every tree operation that
    matches leaves against transactions goes through this function.
    """
    if isinstance(transaction, str):
        return hash_text(transaction)
    return hash_canonical(transaction)


def combine(left: str, right: str) -> str:
    """
    Compute the parent hash of two child hashes.

    parent = sha256(left + right), over the hex text of both children.
    """
    return hash_text(left + right)


__all__ = [
    "sha256_hex",
    "hash_text",
    "hash_canonical",
    "hash_leaf",
    "combine",
]
