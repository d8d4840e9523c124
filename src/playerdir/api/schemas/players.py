from __future__ import annotations

from pydantic import BaseModel, Field

from playerdir.directory import Ordering


class PlayerListResponse(BaseModel):
    players: list[str]
    count: int
    order: Ordering
    min_events: int


class PlayerCountResponse(BaseModel):
    count: int


class PlayerEventsResponse(BaseModel):
    name: str
    events_attended: int


class EnsureResponse(BaseModel):
    path: str
    created: bool


class ResetFailureResponse(BaseModel):
    name: str | None = None
    reason: str


class ResetResponse(BaseModel):
    deleted: list[str] = Field(default_factory=list)
    failed: list[ResetFailureResponse] = Field(default_factory=list)
