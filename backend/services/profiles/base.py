"""Configuration types that parameterize the heuristic review engine.

A ReviewProfile carries everything that differs between document kinds:
keyword tables, score rules and weights, issue wording, and the text
templates the report builder fills in. The engine itself is kind-agnostic.
"""

import re
from dataclasses import dataclass


def condition_holds(value: int, min_value: int, max_value: int | None) -> bool:
    if value < min_value:
        return False
    return max_value is None or value <= max_value


@dataclass(frozen=True)
class ScoreRule:
    """Add `points` when min_value <= signal value <= max_value.

    Booleans count as 0/1, so the defaults mean "signal present".
    Use max_value=0 for "signal absent".
    """
    signal: str
    points: int
    min_value: int = 1
    max_value: int | None = None

    def applies(self, value: int) -> bool:
        return condition_holds(value, self.min_value, self.max_value)


@dataclass(frozen=True)
class Dimension:
    key: str
    label: str
    base: int
    weight: float
    rules: tuple[ScoreRule, ...] = ()


@dataclass(frozen=True)
class Finding:
    """Critique line, optionally gated on a signal like a ScoreRule."""
    text: str
    signal: str | None = None
    min_value: int = 1
    max_value: int | None = None


@dataclass(frozen=True)
class CritiqueTemplate:
    """One section block of the report.

    Emitted when any of `signals` is absent (uses `missing`) or any of
    `dimensions` scores below the weak threshold (uses `weak`).
    """
    title: str
    missing: str = ""
    weak: str = ""
    signals: tuple[str, ...] = ()
    dimensions: tuple[str, ...] = ()
    findings: tuple[Finding, ...] = ()


@dataclass(frozen=True)
class RewriteTemplate:
    title: str
    template: str
    note: str = ""


@dataclass(frozen=True)
class IssueTexts:
    """Wording for each outcome of the ordered issue rules."""
    no_direction: str
    no_metrics: str
    no_projects: str
    fallback: str


@dataclass(frozen=True)
class ReviewProfile:
    kind: str
    title: str
    noun: str  # used in user-facing messages ("Resume text is too short")

    section_keywords: dict[str, tuple[str, ...]]
    role_keywords: tuple[tuple[str, tuple[str, ...]], ...]
    tool_keywords: tuple[str, ...]
    weak_phrases: tuple[str, ...]
    metrics_pattern: re.Pattern
    detect_multi_role: bool

    dimensions: tuple[Dimension, ...]
    issues: IssueTexts

    reality_check: str
    verdicts: dict[str, str]
    strategy_notes: dict[str, str]
    critiques: tuple[CritiqueTemplate, ...]
    rewrites: tuple[RewriteTemplate, ...]
    plan_title: str
    plan_label: str  # "Day" or "Step"
    plan: tuple[str, ...]
    fixes: dict[str, str]
    polish_fix: str
    closing: str = ""
    weak_threshold: int = 70
    max_fixes: int = 3

    @property
    def dimension_keys(self) -> tuple[str, ...]:
        return tuple(d.key for d in self.dimensions)

    @property
    def labels(self) -> dict[str, str]:
        return {d.key: d.label for d in self.dimensions}
