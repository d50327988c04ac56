"""
CLI Prove Command

Produce an audit proof for one leaf of a transaction tree.

Usage:
    ledger prove transactions.json <leaf_hash> [--out proof.json] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace

from ledger.merkle import MerkleProver, generate_full_tree
from ledger.schemas.errors import ErrorCodes, InvalidLeafCountException, LedgerError
from ledger_cli.files import InputFileError, load_transactions, save_audit_proof


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_LEAF_NOT_FOUND = 2


def _report_error(args: Namespace, error: LedgerError) -> None:
    if args.json:
        print(json.dumps({"ok": False, "error": error.model_dump()}, indent=2))
    else:
        print(f"Error: {error.message}", file=sys.stderr)


def prove_cmd(args: Namespace) -> int:
    """Handle prove command."""
    try:
        root = generate_full_tree(load_transactions(args.transactions))
    except InputFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except InvalidLeafCountException as e:
        _report_error(args, e.to_error_model())
        return EXIT_RUNTIME_ERROR

    proof = MerkleProver.prove(root, args.leaf_hash)
    if proof is None:
        _report_error(
            args,
            LedgerError(
                code=ErrorCodes.LEAF_NOT_FOUND,
                message=f"No leaf with hash {args.leaf_hash}",
                details={"leaf_hash": args.leaf_hash, "root_hash": root.hash},
            ),
        )
        return EXIT_LEAF_NOT_FOUND

    if args.out:
        path = save_audit_proof(proof, args.out)
        logger.info(f"Wrote proof with {proof.depth} steps to {path}")
        if args.json:
            print(json.dumps({"ok": True, "path": str(path), "steps": proof.depth}, indent=2))
        else:
            print(f"Proof written to {path}")
    else:
        print(proof.model_dump_json(indent=2))
    return EXIT_SUCCESS
