"""Deterministic partition key derivation for arbitrary events. Pure and stateless."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from app.domain.serialization import (
    CanonicalSerializer,
    JsonCanonicalSerializer,
    sha3_512_hex,
    utf16_length,
)

TRIVIAL_PARTITION_KEY = "0"
MAX_PARTITION_KEY_LENGTH = 256
PARTITION_KEY_FIELD = "partitionKey"


class PartitionKeySource(str, Enum):
    """Which derivation branch produced a partition key."""

    TRIVIAL = "trivial"  # No event given
    EVENT_HASH = "event_hash"  # Digest of the whole event; no explicit key
    EXPLICIT = "explicit"  # Explicit key, used as-is
    EXPLICIT_HASH = "explicit_hash"  # Explicit key longer than the limit, hashed


@dataclass(frozen=True)
class PartitionKeyResult:
    key: str
    source: PartitionKeySource


def _explicit_key(event: Any) -> Any:
    """Return the event's partitionKey field, or None when absent or the event is not a record."""
    if isinstance(event, Mapping):
        return event.get(PARTITION_KEY_FIELD)
    return None


class PartitionKeyDeriver:
    """
    Derives a stable partition key string from an event.
    Deterministic: equal events always yield the same key. Safe to share across threads.
    """

    def __init__(self, serializer: Optional[CanonicalSerializer] = None) -> None:
        self._serializer = serializer or JsonCanonicalSerializer()

    def resolve(self, event: Any = None) -> PartitionKeyResult:
        """
        Derive the key and report which branch produced it.
        Raises SerializationError if the event (or its partitionKey) cannot be serialized.
        """
        if event is None:
            return PartitionKeyResult(TRIVIAL_PARTITION_KEY, PartitionKeySource.TRIVIAL)

        explicit = _explicit_key(event)
        if explicit is None:
            # Fixed-size digest, always within the length limit.
            digest = sha3_512_hex(self._serializer.serialize(event))
            return PartitionKeyResult(digest, PartitionKeySource.EVENT_HASH)

        candidate = explicit if isinstance(explicit, str) else self._serializer.serialize(explicit)
        if utf16_length(candidate) > MAX_PARTITION_KEY_LENGTH:
            return PartitionKeyResult(sha3_512_hex(candidate), PartitionKeySource.EXPLICIT_HASH)
        return PartitionKeyResult(candidate, PartitionKeySource.EXPLICIT)

    def derive(self, event: Any = None) -> str:
        """Return the partition key for event."""
        return self.resolve(event).key


_default_deriver = PartitionKeyDeriver()


def deterministic_partition_key(event: Any = None) -> str:
    """Module-level shortcut using the default JSON serializer."""
    return _default_deriver.derive(event)
