"""Stage 4: assemble the Report from signals, scores and profile templates.

Template-based, deterministic. Text placed in the Report is raw; the HTML
adapter is responsible for escaping it.
"""

from models.schemas.report import CritiqueSection, PlanStep, Report, RewriteExample
from models.schemas.score_card import ScoreCard
from models.schemas.signal_set import SignalSet
from services.errors import PreconditionViolation
from services.pipeline.scorer import signal_value
from services.profiles import ReviewProfile
from services.profiles.base import CritiqueTemplate, condition_holds

READY_MIN = 80
CLOSE_MIN = 65

ROLE_PLACEHOLDER = "[target role]"


def readiness_tier(overall: int) -> str:
    if overall >= READY_MIN:
        return "ready"
    if overall >= CLOSE_MIN:
        return "close"
    return "not ready"


def _template_context(signals: SignalSet) -> dict[str, str]:
    role = signals.target_role or signals.top_role or ROLE_PLACEHOLDER
    return {
        "role": role,
        "target_role": signals.target_role or ROLE_PLACEHOLDER,
        "top_role": signals.top_role,
        "roles": ", ".join(r.name for r in signals.detected_roles[:3]),
        "weak_phrases": ", ".join(f'"{p}"' for p in signals.weak_phrases),
        "tools": ", ".join(signals.tools),
        "metrics_count": str(signals.metrics_count),
        "word_count": str(signals.word_count),
    }


def _check_score_card(card: ScoreCard, profile: ReviewProfile) -> None:
    expected = set(profile.dimension_keys)
    if set(card.score_breakdown) != expected:
        raise PreconditionViolation(
            f"Score card keys {sorted(card.score_breakdown)} do not match {profile.kind} dimensions"
        )
    unknown = {d for c in profile.critiques for d in c.dimensions} - expected
    if unknown:
        raise PreconditionViolation(f"Critiques reference unknown dimensions: {sorted(unknown)}")
    for value in [card.overall, *card.score_breakdown.values()]:
        if not 0 <= value <= 100:
            raise PreconditionViolation(f"Score out of range: {value}")


def _critique_section(
    template: CritiqueTemplate,
    signals: SignalSet,
    card: ScoreCard,
    threshold: int,
    context: dict[str, str],
) -> CritiqueSection | None:
    absent = any(signal_value(signals, s) == 0 for s in template.signals)
    weak = any(card.score_breakdown[d] < threshold for d in template.dimensions)
    if not absent and not weak:
        return None

    findings = [
        f.text.format_map(context)
        for f in template.findings
        if f.signal is None
        or condition_holds(signal_value(signals, f.signal), f.min_value, f.max_value)
    ]
    summary = template.missing if absent and template.missing else template.weak
    return CritiqueSection(title=template.title, summary=summary, findings=findings)


def _fix_list(card: ScoreCard, profile: ReviewProfile) -> list[str]:
    """Fixes for the lowest not-ready dimensions, worst first."""
    low = [
        key for key in profile.dimension_keys
        if card.score_breakdown[key] < CLOSE_MIN and key in profile.fixes
    ]
    low.sort(key=lambda key: card.score_breakdown[key])  # stable on profile order
    fixes = [profile.fixes[key] for key in low[: profile.max_fixes]]
    return fixes or [profile.polish_fix]


def build_report(
    signals: SignalSet,
    card: ScoreCard,
    issue: str,
    profile: ReviewProfile,
    mentor_name: str = "",
) -> Report:
    _check_score_card(card, profile)
    if not issue:
        raise PreconditionViolation("Biggest issue must not be empty")

    tier = readiness_tier(card.overall)
    context = _template_context(signals)

    sections = []
    for template in profile.critiques:
        section = _critique_section(template, signals, card, profile.weak_threshold, context)
        if section is not None:
            sections.append(section)

    rewrites = [
        RewriteExample(
            title=r.title,
            template=r.template.format_map(context),
            note=r.note.format_map(context),
        )
        for r in profile.rewrites
    ]
    plan = [
        PlanStep(label=f"{profile.plan_label} {i}", action=step.format_map(context))
        for i, step in enumerate(profile.plan, start=1)
    ]
    sign_off = ["Thanks,", "Your Friend and Mentor,"]
    if mentor_name:
        sign_off.append(mentor_name)

    return Report(
        kind=profile.kind,
        title=profile.title,
        readiness=tier,
        verdict=profile.verdicts[tier],
        biggest_issue=issue,
        reality_check=profile.reality_check,
        score=card,
        score_labels=profile.labels,
        detected_roles=signals.detected_roles,
        sections=sections,
        rewrites=rewrites,
        plan_title=profile.plan_title,
        plan=plan,
        fix_before_applying=_fix_list(card, profile),
        strategy_note=profile.strategy_notes[tier],
        closing=profile.closing,
        sign_off=sign_off,
    )
