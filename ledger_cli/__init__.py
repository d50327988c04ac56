"""
Ledger CLI

Command-line interface for building Merkle trees over transactions,
producing audit proofs and verifying them offline.

Usage:
    python -m ledger_cli build transactions.json
    python -m ledger_cli prove transactions.json <leaf_hash> --out proof.json
    python -m ledger_cli verify proof.json
    python -m ledger_cli config --show
"""

__version__ = "0.1.0"
