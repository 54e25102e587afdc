"""Rendered review: the single value both output adapters read from."""

from models.schemas.base import CamelModel
from models.schemas.score_card import ScoreCard
from models.schemas.signal_set import RoleHit


class CritiqueSection(CamelModel):
    title: str
    summary: str = ""
    findings: list[str] = []


class RewriteExample(CamelModel):
    """Copyable template; `[blank]` marks what the user fills in."""
    title: str
    template: str
    note: str = ""


class PlanStep(CamelModel):
    label: str
    action: str


class Report(CamelModel):
    kind: str
    title: str
    readiness: str  # "ready" | "close" | "not ready"
    verdict: str
    biggest_issue: str
    reality_check: str = ""
    score: ScoreCard
    score_labels: dict[str, str] = {}
    detected_roles: list[RoleHit] = []
    sections: list[CritiqueSection] = []
    rewrites: list[RewriteExample] = []
    plan_title: str = ""
    plan: list[PlanStep] = []
    fix_before_applying: list[str] = []
    strategy_note: str = ""
    closing: str = ""
    sign_off: list[str] = []
    engine: str = "heuristic"
