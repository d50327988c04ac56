"""
CLI Verify Command

Verify an audit proof offline, optionally against an independently
known root hash.

Usage:
    ledger verify proof.json [--root HASH] [--json]
"""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from typing import Any

from ledger.merkle import MerkleVerifier
from ledger.schemas.errors import ErrorCodes, LedgerError
from ledger_cli.files import InputFileError, load_audit_proof


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class VerifySummary:
    """Summary of proof verification for CLI output."""
    proof_path: str = ""
    leaf_hash: str = ""
    root_hash: str = ""
    steps: int = 0
    ok: bool = False
    error: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if d["error"] is None:
            del d["error"]
        return d


def verify_cmd(args: Namespace) -> int:
    """Handle verify command."""
    try:
        proof = load_audit_proof(args.proof_path)
    except InputFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # A root supplied on the command line overrides the one in the file
    if args.root:
        proof = proof.model_copy(update={"root_hash": args.root})

    ok = MerkleVerifier.verify(proof)
    summary = VerifySummary(
        proof_path=str(args.proof_path),
        leaf_hash=proof.leaf_hash,
        root_hash=proof.root_hash,
        steps=proof.depth,
        ok=ok,
    )
    if not ok:
        summary.error = LedgerError(
            code=ErrorCodes.ROOT_MISMATCH,
            message="Recomputed root does not match the claimed root",
        ).model_dump()

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        status = "VALID" if ok else "INVALID"
        print(f"{status}: leaf {summary.leaf_hash} against root {summary.root_hash}")

    return EXIT_SUCCESS if ok else EXIT_VERIFICATION_FAILED
