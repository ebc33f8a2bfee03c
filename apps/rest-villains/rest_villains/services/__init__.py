"""Business logic services package with public service helpers."""

from .villain_service import (
    MUTABLE_FIELDS,
    VillainNotFoundError,
    VillainService,
    get_villain_service,
)

__all__ = [
    "MUTABLE_FIELDS",
    "VillainNotFoundError",
    "VillainService",
    "get_villain_service",
]
