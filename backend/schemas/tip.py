"""Pydantic schemas for fishing tips."""
from pydantic import BaseModel


class FishingTipResponse(BaseModel):
    """Generated fishing tip for a forecast day."""

    date: str
    tip: str
