"""Pydantic schemas for the partition key API. No derivation logic here."""

from typing import Any, List

from pydantic import BaseModel, Field

from app.domain.partition_key import PartitionKeyResult, PartitionKeySource


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class PartitionKeyRequest(BaseModel):
    """Single event to derive a key for. Omitted and null event are equivalent."""

    event: Any = Field(None, description="Arbitrary JSON value; may carry a partitionKey field")


class PartitionKeyBatchRequest(BaseModel):
    """Events to derive keys for, in order."""

    events: List[Any] = Field(..., description="Arbitrary JSON values")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class PartitionKeyResponse(BaseModel):
    partition_key: str
    source: PartitionKeySource

    @classmethod
    def from_result(cls, result: PartitionKeyResult) -> "PartitionKeyResponse":
        return cls(partition_key=result.key, source=result.source)


class PartitionKeyBatchResponse(BaseModel):
    partition_keys: List[PartitionKeyResponse]
