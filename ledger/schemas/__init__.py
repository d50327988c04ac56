"""
Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

# Canonical serialization API
from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    loads_canonical,
)

# Error models and exceptions
from .errors import (
    CanonicalizationException,
    ConfigurationException,
    ErrorCodes,
    InvalidLeafCountException,
    LedgerError,
    LedgerException,
)

# Proof exchange format
from .proof import (
    AuditProof,
    ProofStep,
)

# Transactions
from .transaction import (
    StakingTransaction,
    Transaction,
)

__all__ = [
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "loads_canonical",
    # Errors
    "CanonicalizationException",
    "ConfigurationException",
    "ErrorCodes",
    "InvalidLeafCountException",
    "LedgerError",
    "LedgerException",
    # Proofs
    "AuditProof",
    "ProofStep",
    # Transactions
    "StakingTransaction",
    "Transaction",
]
