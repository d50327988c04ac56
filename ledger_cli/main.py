"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m ledger_cli build <transactions.json> [--json]
    python -m ledger_cli prove <transactions.json> <leaf_hash> [--out PATH] [--json]
    python -m ledger_cli verify <proof.json> [--root HASH] [--json]
    python -m ledger_cli config --show

Environment Variables:
    LEDGER_STAKING_WALLET_PATH      Staking wallet public key (DER or PEM)
    LEDGER_MESSAGE_CACHE_CAPACITY   Message cache capacity (default: 1000)
    LEDGER_LOG_LEVEL                Log level (default: INFO)
    LEDGER_LOG_FILE                 Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from ledger.config import RuntimeConfig
from ledger.schemas.errors import LedgerException
from ledger_cli import __version__
from ledger_cli.commands import build, prove, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def load_config(path: Path | None) -> RuntimeConfig:
    """Load config from a YAML file when given, then overlay env vars."""
    if path is None:
        return RuntimeConfig.from_env()
    return RuntimeConfig.from_yaml(path).with_env_overrides()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="ledger",
        description="Merkle ledger CLI - build transaction trees, produce and verify audit proofs.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- build command ---
    build_parser = subparsers.add_parser(
        "build",
        help="Build a Merkle tree and print its root",
        description="Build a Merkle tree over a JSON list of transactions (power-of-two length).",
    )
    build_parser.add_argument("transactions", type=Path, help="JSON file with a list of transactions")
    build_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    build_parser.set_defaults(func=build.build_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Produce an audit proof for one leaf",
        description="Build the tree and emit the sibling hashes proving membership of a leaf.",
    )
    prove_parser.add_argument("transactions", type=Path, help="JSON file with a list of transactions")
    prove_parser.add_argument("leaf_hash", type=str, help="Hash of the leaf to prove")
    prove_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the proof JSON to this path instead of stdout",
    )
    prove_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Report errors and results as machine-readable JSON",
    )
    prove_parser.set_defaults(func=prove.prove_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify an audit proof offline",
        description="Recompute the root from a proof and compare it with the claimed root.",
    )
    verify_parser.add_argument("proof_path", type=Path, help="Path to audit proof JSON")
    verify_parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Trusted root hash to verify against (overrides the proof's root)",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON report",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Show effective configuration",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.show:
        print(json.dumps(args.runtime_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: ledger config --show")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except LedgerException as e:
        print(f"Error loading configuration: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.logging.level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
