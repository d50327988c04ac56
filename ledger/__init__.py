"""
Merkle ledger core.

Subpackages:
- merkle: tree construction, population, path lookup and audit proofs
- crypto: hashing primitives and wallet keys
- schemas: transactions, proof exchange format, canonical JSON, errors
- cache: bounded message deduplication
- config: runtime configuration
"""

__version__ = "0.1.0"
