"""
Runtime Configuration Module

Provides configuration loading and management for the ledger.
"""

from .runtime import RuntimeConfig, StakingConfig, CacheConfig, LoggingConfig

__all__ = [
    "RuntimeConfig",
    "StakingConfig",
    "CacheConfig",
    "LoggingConfig",
]
