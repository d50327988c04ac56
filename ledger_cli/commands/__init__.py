"""
CLI command modules.
"""

from ledger_cli.commands import build, prove, verify

__all__ = ["build", "prove", "verify"]
