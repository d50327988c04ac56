"""
CLI Build Command

Build a Merkle tree from a transaction file and report its root.

Usage:
    ledger build transactions.json [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field

from ledger.merkle import compute_tree_depth, generate_full_tree, iter_leaves
from ledger.schemas.errors import InvalidLeafCountException
from ledger_cli.files import InputFileError, load_transactions


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


@dataclass
class BuildSummary:
    """Summary of a tree build for CLI output."""
    source: str = ""
    root_hash: str = ""
    leaf_count: int = 0
    depth: int = 0
    leaf_hashes: list[str] = field(default_factory=list)


def build_cmd(args: Namespace) -> int:
    """Handle build command."""
    try:
        transactions = load_transactions(args.transactions)
        root = generate_full_tree(transactions)
    except InputFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except InvalidLeafCountException as e:
        if args.json:
            print(json.dumps({"ok": False, "error": e.to_error_model().model_dump()}, indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    summary = BuildSummary(
        source=str(args.transactions),
        root_hash=root.hash,
        leaf_count=len(transactions),
        depth=compute_tree_depth(len(transactions)),
        leaf_hashes=[leaf.hash for leaf in iter_leaves(root)],
    )
    logger.info(f"Built tree over {summary.leaf_count} transactions")

    if args.json:
        print(json.dumps(asdict(summary), indent=2))
    else:
        print(f"Root:   {summary.root_hash}")
        print(f"Leaves: {summary.leaf_count}")
        print(f"Depth:  {summary.depth}")
        for i, leaf_hash in enumerate(summary.leaf_hashes):
            print(f"  [{i}] {leaf_hash}")
    return EXIT_SUCCESS
