"""
Schemas
File: canonical.py

Purpose: Deterministic serialization used to derive transaction leaf hashes.

CRITICAL: All outputs from this module MUST be deterministic across runs.
Two parties hashing the same transaction must obtain the same leaf hash,
otherwise a skeleton tree can never be populated from received payloads.
"""

import json
import math
from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")


def _canonical_decimal(value: Decimal, path: str = "") -> str:
    """
    Render a Decimal without exponent or trailing zeros.

    Raises:
        CanonicalizationException: If the decimal is NaN or Infinity.
    """
    if not value.is_finite():
        raise CanonicalizationException(
            message=f"Non-finite decimal value encountered: {value}",
            details={"path": path, "value": str(value)},
        )
    normalized = value.normalize()
    if normalized == 0:
        return "0"
    return format(normalized, "f")


def canonicalize_value(value: Any, path: str = "") -> Any:
    """
    Recursively canonicalize a value for deterministic JSON serialization.

    Args:
        value: Any Python value to canonicalize.
        path: Current path for error reporting.

    Returns:
        A JSON-serializable canonical representation.

    Raises:
        CanonicalizationException: If the value cannot be canonicalized
            (e.g., contains NaN/Infinity numbers).
    """
    if value is None:
        return None

    if isinstance(value, bool):
        # Must check bool before int since bool is subclass of int
        return value

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            raise CanonicalizationException(
                message=f"Non-finite float value encountered: {value}",
                details={"path": path, "value": str(value)},
            )
        return value

    if isinstance(value, Decimal):
        return _canonical_decimal(value, path)

    if isinstance(value, str):
        return value

    if isinstance(value, BaseModel):
        # Python mode keeps Decimals intact so they are normalized above
        dumped = value.model_dump(
            mode="python",
            by_alias=True,
            exclude_none=True,
        )
        return canonicalize_value(dumped, path)

    if isinstance(value, dict):
        # Keys will be sorted during JSON serialization
        return {
            str(k): canonicalize_value(v, f"{path}.{k}" if path else str(k))
            for k, v in value.items()
            if v is not None
        }

    if isinstance(value, (list, tuple)):
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if isinstance(value, bytes):
        return value.hex()

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to canonical JSON string.

    Args:
        obj: A Pydantic model, dict, or other serializable object.

    Returns:
        A canonical JSON string with:
            - Sorted keys
            - No extra whitespace
            - None fields excluded
            - Decimals as plain strings ("1.5", never "1.50" or "1.5E+0")
            - Bytes as lowercase hex

    Raises:
        CanonicalizationException: If serialization fails.

    Example:
        >>> dumps_canonical({"b": 2, "a": Decimal("1.50")})
        '{"a":"1.5","b":2}'
    """
    try:
        canonicalized = canonicalize_value(obj)
        return json.dumps(
            canonicalized,
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
        )
    except CanonicalizationException:
        raise
    except (TypeError, ValueError) as e:
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def loads_canonical(json_str: str) -> Any:
    """
    Parse a canonical JSON string.

    Note: Decimals are not restored - they remain as strings.
    """
    return json.loads(json_str)


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """Check if two objects have identical canonical JSON representations."""
    try:
        return dumps_canonical(obj1) == dumps_canonical(obj2)
    except CanonicalizationException:
        return False
