"""Scorer output: clamped sub-scores plus the aggregate."""

from pydantic import ConfigDict

from models.schemas.base import CamelModel


class ScoreCard(CamelModel):
    """Dimension key -> 0..100, and the rounded weighted overall (0..100)."""
    model_config = ConfigDict(frozen=True)

    overall: int = 0
    score_breakdown: dict[str, int] = {}
