"""Canonical record entry stored in each player file."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RecordEntry(BaseModel):
    """One rated game as persisted in a player's record file."""

    opponent: str = Field(..., min_length=1)
    event: str = Field(..., min_length=1)
    rating: float
    rd: float = Field(..., gt=0.0)
    volatility: float = Field(..., gt=0.0)
    outcome: float = Field(..., ge=0.0, le=1.0)
    played_on: Optional[date] = None

    model_config = ConfigDict(frozen=True)
