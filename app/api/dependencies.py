"""FastAPI dependency injection: partition key deriver, correlation_id."""

from fastapi import Request

from app.domain.partition_key import PartitionKeyDeriver

_deriver: PartitionKeyDeriver | None = None


def get_partition_key_deriver() -> PartitionKeyDeriver:
    """Return singleton deriver. Stateless, so one instance serves every request."""
    global _deriver
    if _deriver is None:
        _deriver = PartitionKeyDeriver()
    return _deriver


def get_correlation_id(request: Request) -> str:
    """Extract correlation_id from request.state (set by middleware)."""
    return getattr(request.state, "correlation_id", "") or ""
