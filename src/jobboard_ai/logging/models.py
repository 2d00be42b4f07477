"""Usage logging data models."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field

from jobboard_ai.operations import Operation


class UsageLog(BaseModel):
    """Single usage log entry for one AI operation call."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: str = "anonymous"
    timestamp: datetime = Field(default_factory=datetime.now)
    operation: Operation
    model: str | None = None
    elapsed_seconds: float = 0.0
    input_tokens: int = 0
    output_tokens: int = 0
    estimated_cost_usd: float = 0.0
    success: bool = True
    error_message: str | None = None
    defaulted_fields: list[str] = []  # ATS fields replaced by fallbacks
