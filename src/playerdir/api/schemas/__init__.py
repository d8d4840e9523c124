"""Pydantic models for API I/O."""

from .players import (
    EnsureResponse,
    PlayerCountResponse,
    PlayerEventsResponse,
    PlayerListResponse,
    ResetFailureResponse,
    ResetResponse,
)

__all__ = [
    "EnsureResponse",
    "PlayerCountResponse",
    "PlayerEventsResponse",
    "PlayerListResponse",
    "ResetFailureResponse",
    "ResetResponse",
]
