"""Pydantic schemas for API validation and serialization."""

from app.domain.schemas.partition_key import (
    PartitionKeyBatchRequest,
    PartitionKeyBatchResponse,
    PartitionKeyRequest,
    PartitionKeyResponse,
)

__all__ = [
    "PartitionKeyBatchRequest",
    "PartitionKeyBatchResponse",
    "PartitionKeyRequest",
    "PartitionKeyResponse",
]
