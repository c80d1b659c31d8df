"""Partition keys API router: POST /partition-keys/ (single), POST /partition-keys/batch."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api.dependencies import get_correlation_id, get_partition_key_deriver
from app.config.settings import AppSettings, get_settings
from app.domain.partition_key import PartitionKeyDeriver
from app.domain.schemas.partition_key import (
    PartitionKeyBatchRequest,
    PartitionKeyBatchResponse,
    PartitionKeyRequest,
    PartitionKeyResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=PartitionKeyResponse)
async def derive_partition_key(
    body: PartitionKeyRequest,
    deriver: Annotated[PartitionKeyDeriver, Depends(get_partition_key_deriver)],
    correlation_id: Annotated[str, Depends(get_correlation_id)],
):
    """Derive the partition key for one event. SerializationError is mapped to 422 by the app handler."""
    result = deriver.resolve(body.event)
    logger.debug(
        "partition_key_derived",
        extra={"source": result.source.value, "correlation_id": correlation_id},
    )
    return PartitionKeyResponse.from_result(result)


@router.post("/batch", response_model=PartitionKeyBatchResponse)
async def derive_partition_keys(
    body: PartitionKeyBatchRequest,
    deriver: Annotated[PartitionKeyDeriver, Depends(get_partition_key_deriver)],
    settings: Annotated[AppSettings, Depends(get_settings)],
    correlation_id: Annotated[str, Depends(get_correlation_id)],
):
    """Derive keys for several events, preserving input order. Fails as a whole on the first bad event."""
    if len(body.events) > settings.max_batch_size:
        return JSONResponse(
            status_code=422,
            content={"detail": f"At most {settings.max_batch_size} events per batch"},
        )
    keys = [PartitionKeyResponse.from_result(deriver.resolve(event)) for event in body.events]
    logger.debug(
        "partition_keys_derived",
        extra={"count": len(keys), "correlation_id": correlation_id},
    )
    return PartitionKeyBatchResponse(partition_keys=keys)
