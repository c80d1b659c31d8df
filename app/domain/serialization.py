"""
Canonical serialization and hashing primitives for partition key derivation.

Canonical JSON here means the conventional compact JSON text of a value:
keys in insertion order, no whitespace, non-ASCII characters kept verbatim.
Determinism only has to hold across repeated calls with equal input, so keys
are not sorted.
"""

import hashlib
import json
import math
from typing import Any, Protocol, Set

from app.domain.exceptions import SerializationError


class CanonicalSerializer(Protocol):
    """Protocol for turning an arbitrary value into canonical JSON text."""

    def serialize(self, value: Any) -> str:
        """Return canonical JSON text. Raises SerializationError if value cannot be represented."""
        ...


def _replace_non_finite(value: Any, active: Set[int]) -> Any:
    """Copy of value with NaN/Infinity replaced by None, the way JSON.stringify renders them as null."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, (dict, list, tuple)):
        if id(value) in active:
            raise SerializationError("Value is not JSON-serializable: Circular reference detected")
        active.add(id(value))
        try:
            if isinstance(value, dict):
                return {k: _replace_non_finite(v, active) for k, v in value.items()}
            return [_replace_non_finite(v, active) for v in value]
        finally:
            active.discard(id(value))
    return value


def canonical_json(value: Any) -> str:
    """
    Serialize value to compact JSON text.

    Non-finite floats (NaN/Infinity) have no JSON form and are written as null.
    Raises SerializationError for circular references and unsupported types.

    Example:
        >>> canonical_json({"b": 2, "a": [1, "x", float("nan")]})
        '{"b":2,"a":[1,"x",null]}'
    """
    try:
        return json.dumps(
            _replace_non_finite(value, set()),
            separators=(",", ":"),
            ensure_ascii=False,
        )
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Value is not JSON-serializable: {e}") from e


class JsonCanonicalSerializer:
    """Default CanonicalSerializer backed by the json module."""

    def serialize(self, value: Any) -> str:
        return canonical_json(value)


def sha3_512_hex(text: str) -> str:
    """Lowercase hex SHA3-512 digest of the UTF-8 bytes of text (128 characters)."""
    # Unpaired surrogates become U+FFFD, as a UTF-16 string would be encoded.
    text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return hashlib.sha3_512(text.encode("utf-8")).hexdigest()


def utf16_length(text: str) -> int:
    # Characters outside the BMP occupy two UTF-16 code units.
    return len(text.encode("utf-16-le", "surrogatepass")) // 2
