"""Domain layer: partition key derivation, serialization, schemas, exceptions. Pure logic only."""

from app.domain.exceptions import DomainError, SerializationError
from app.domain.partition_key import (
    MAX_PARTITION_KEY_LENGTH,
    TRIVIAL_PARTITION_KEY,
    PartitionKeyDeriver,
    PartitionKeyResult,
    PartitionKeySource,
    deterministic_partition_key,
)
from app.domain.serialization import (
    CanonicalSerializer,
    JsonCanonicalSerializer,
    canonical_json,
    sha3_512_hex,
)

__all__ = [
    "CanonicalSerializer",
    "DomainError",
    "JsonCanonicalSerializer",
    "MAX_PARTITION_KEY_LENGTH",
    "PartitionKeyDeriver",
    "PartitionKeyResult",
    "PartitionKeySource",
    "SerializationError",
    "TRIVIAL_PARTITION_KEY",
    "canonical_json",
    "deterministic_partition_key",
    "sha3_512_hex",
]
