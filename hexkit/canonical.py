"""
Deterministic serialization for records holding hex-capable fields.

Hex values and raw bytes are emitted as lowercase hex string scalars,
so a record hashes the same whether a field was built from bytes,
from a hex string or from a FixedHex instance.

CRITICAL: All outputs from this module MUST be deterministic across runs.
"""

import json
import logging
import math
from enum import Enum
from typing import Any

from pydantic import BaseModel

from .errors import CanonicalizationException
from .hex import Hex, ScalarSerializer, serialize_to_hex, to_hex

logger = logging.getLogger(__name__)

# Canonical JSON separators - no whitespace
CANONICAL_JSON_SEPARATORS: tuple[str, str] = (",", ":")

_SCALAR = ScalarSerializer()


def _validate_float(value: float, path: str = "") -> None:
    """
    Validate that a float is finite (not NaN or Infinity).

    Raises:
        CanonicalizationException: If the float is NaN or Infinity.
    """
    if not math.isfinite(value):
        raise CanonicalizationException(
            message=f"Non-finite float value encountered: {value}",
            details={"path": path, "value": str(value)},
        )


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
            (NaN/Infinity floats, unsupported types).
    """
    if value is None:
        return None

    if isinstance(value, Enum):
        # Before str/int: str and int enums are instances of both
        return canonicalize_value(value.value, path)

    if isinstance(value, bool):
        # Must check bool before int since bool is subclass of int
        return value

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        _validate_float(value, path)
        return value

    if isinstance(value, str):
        return value

    # Hex classes pass the protocol check too; only instances serialize
    if isinstance(value, Hex) and not isinstance(value, type):
        return serialize_to_hex(value, _SCALAR)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return to_hex(value)

    if isinstance(value, BaseModel):
        dumped = value.model_dump(
            mode="json",
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
        # Order is preserved, never sorted
        return [
            canonicalize_value(item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    raise CanonicalizationException(
        message=f"Cannot canonicalize value of type {type(value).__name__}",
        details={"path": path, "type": type(value).__name__},
    )


def to_canonical_json_dict(obj: Any) -> dict[str, Any]:
    """
    Convert an object to a canonical JSON-serializable dictionary.

    Raises:
        CanonicalizationException: If the object cannot be canonicalized
            or does not serialize to a dict.
    """
    canonicalized = canonicalize_value(obj)

    if not isinstance(canonicalized, dict):
        raise CanonicalizationException(
            message="to_canonical_json_dict expects an object that serializes to a dict",
            details={"type": type(obj).__name__, "result_type": type(canonicalized).__name__},
        )

    return canonicalized


def dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to canonical JSON string.

    Returns:
        A canonical JSON string with:
            - Sorted keys
            - No extra whitespace
            - None fields excluded
            - Hex values and bytes as lowercase hex strings
            - Enums as their values
            - No NaN/Infinity floats

    Raises:
        CanonicalizationException: If serialization fails.

    Example:
        >>> dumps_canonical({"b": b"\\x0a", "a": 1})
        '{"a":1,"b":"0a"}'
    """
    try:
        canonicalized = canonicalize_value(obj)
        return json.dumps(
            canonicalized,
            sort_keys=True,
            separators=CANONICAL_JSON_SEPARATORS,
            ensure_ascii=False,
        )
    except CanonicalizationException as e:
        logger.debug(f"Canonicalization failed: {e.message} {e.details}")
        raise
    except Exception as e:
        logger.debug(f"Canonical JSON encoding failed for {type(obj).__name__}: {e}")
        raise CanonicalizationException(
            message=f"Failed to serialize to canonical JSON: {e}",
            details={"type": type(obj).__name__, "error": str(e)},
        ) from e


def loads_canonical(json_str: str) -> Any:
    """
    Parse a canonical JSON string.

    Note: hex fields stay strings; rebuild them with the matching
    from_hex() or by validating into the Pydantic model.
    """
    return json.loads(json_str)


def canonical_equals(obj1: Any, obj2: Any) -> bool:
    """Check if two objects have identical canonical JSON representations."""
    try:
        return dumps_canonical(obj1) == dumps_canonical(obj2)
    except CanonicalizationException:
        return False


__all__ = [
    "CANONICAL_JSON_SEPARATORS",
    "canonicalize_value",
    "to_canonical_json_dict",
    "dumps_canonical",
    "loads_canonical",
    "canonical_equals",
]
