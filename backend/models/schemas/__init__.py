"""Pydantic contracts passed between the review pipeline stages."""

from models.schemas.signal_set import RoleHit, SignalSet
from models.schemas.score_card import ScoreCard
from models.schemas.report import CritiqueSection, PlanStep, Report, RewriteExample

__all__ = [
    "RoleHit",
    "SignalSet",
    "ScoreCard",
    "CritiqueSection",
    "PlanStep",
    "Report",
    "RewriteExample",
]
