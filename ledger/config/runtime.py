"""
Runtime Configuration

Central configuration for the staking wallet, message deduplication
and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from ledger.cache.message_cache import MessageCache
from ledger.crypto.keys import StakingWallet
from ledger.schemas.errors import ConfigurationException

load_dotenv()


DEFAULT_STAKING_WALLET_PATH = "staking_wallet.der"
DEFAULT_MESSAGE_CACHE_CAPACITY = 1000


@dataclass
class StakingConfig:
    """Where the staking wallet public key lives."""
    wallet_path: str = DEFAULT_STAKING_WALLET_PATH


@dataclass
class CacheConfig:
    """Configuration for the message deduplication cache."""
    message_capacity: int = DEFAULT_MESSAGE_CACHE_CAPACITY


@dataclass
class LoggingConfig:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    staking: StakingConfig = field(default_factory=StakingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - LEDGER_STAKING_WALLET_PATH: Path to the staking wallet public key
        - LEDGER_MESSAGE_CACHE_CAPACITY: Capacity of the message cache
        - LEDGER_LOG_LEVEL: Log level name
        - LEDGER_LOG_FILE: Optional log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv("LEDGER_STAKING_WALLET_PATH"):
            overrides.setdefault("staking", {})["wallet_path"] = os.getenv("LEDGER_STAKING_WALLET_PATH")

        capacity = os.getenv("LEDGER_MESSAGE_CACHE_CAPACITY")
        if capacity:
            try:
                overrides.setdefault("cache", {})["message_capacity"] = int(capacity)
            except ValueError as e:
                raise ConfigurationException(
                    f"LEDGER_MESSAGE_CACHE_CAPACITY must be an integer, got {capacity!r}"
                ) from e

        if os.getenv("LEDGER_LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv("LEDGER_LOG_LEVEL", "INFO").upper()
        if os.getenv("LEDGER_LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv("LEDGER_LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise ConfigurationException(f"Config file not found: {path}", path=str(path))

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Config file must contain a mapping, got {type(data).__name__}",
                path=str(path),
            )
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        try:
            staking = StakingConfig(**(data.get("staking") or {}))
            cache = CacheConfig(**(data.get("cache") or {}))
            log = LoggingConfig(**(data.get("logging") or {}))
        except TypeError as e:
            raise ConfigurationException(f"Invalid configuration: {e}") from e

        return cls(
            staking=staking,
            cache=cache,
            logging=log,
            extra=data.get("extra") or {},
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for section, values in overrides.items():
            target = getattr(new_config, section)
            for key, value in values.items():
                setattr(target, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        return {
            "staking": {"wallet_path": self.staking.wallet_path},
            "cache": {"message_capacity": self.cache.message_capacity},
            "logging": {"level": self.logging.level, "file": self.logging.file},
            "extra": self.extra,
        }

    def load_staking_wallet(self) -> StakingWallet:
        """
        Load the staking wallet from the configured key file.

        Raises:
            ConfigurationException: If the key file is missing or invalid
        """
        return StakingWallet.from_file(self.staking.wallet_path)

    def create_message_cache(self) -> MessageCache:
        return MessageCache(self.cache.message_capacity)
