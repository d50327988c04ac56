"""
CLI File Helpers

Loading transaction lists and audit proofs from JSON files.

Transaction files hold a JSON list. Each entry is either an object with
Transaction fields or a plain string payload.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ledger.schemas.proof import AuditProof
from ledger.schemas.transaction import Transaction


class InputFileError(Exception):
    """Raised when an input file cannot be read or parsed."""


def load_json_file(path: str | Path) -> Any:
    """Load and parse a JSON file."""
    path = Path(path)
    if not path.exists():
        raise InputFileError(f"File not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputFileError(f"Invalid JSON in {path}: {e}") from e


def load_transactions(path: str | Path) -> list[Transaction | str]:
    """Load an ordered list of transactions."""
    data = load_json_file(path)
    if not isinstance(data, list):
        raise InputFileError(f"Expected a JSON list of transactions in {path}")

    transactions: list[Transaction | str] = []
    for i, entry in enumerate(data):
        if isinstance(entry, str):
            transactions.append(entry)
            continue
        try:
            transactions.append(Transaction.model_validate(entry))
        except ValidationError as e:
            raise InputFileError(f"Invalid transaction at index {i}: {e}") from e
    return transactions


def load_audit_proof(path: str | Path) -> AuditProof:
    data = load_json_file(path)
    try:
        return AuditProof.model_validate(data)
    except ValidationError as e:
        raise InputFileError(f"Invalid audit proof in {path}: {e}") from e


def save_audit_proof(proof: AuditProof, path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(proof.model_dump_json(indent=2), encoding="utf-8")
    return path
