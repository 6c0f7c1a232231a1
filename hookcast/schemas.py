"""API Schemas"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class RenderedEvent(BaseModel):
    """Outcome of one webhook delivery."""

    event: str
    status: Literal["rendered", "ignored"]
    lines: list[str] = []
