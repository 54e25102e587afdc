"""Review orchestrator: wires the heuristic stages together.

Flow:
    raw text + target role
      ├─ normalize()                      → normalized text
      ├─ length gate                      → InputTooShort / InputTooLong
      ├─ detect_signals()                 → SignalSet
      ├─ score()                          → ScoreCard
      ├─ biggest_issue()                  → str
      └─ build_report()                   → Report
                 ├─ JSON (pydantic, camelCase)
                 └─ render_html()         → HTML fragment

The optional Gemini path only produces HTML and falls back to the
heuristic engine whenever it is unavailable.
"""

import logging

from config import Settings, settings as default_settings
from models.schemas.report import Report
from services import gemini_client, prompt_builder
from services.errors import InputTooLong, InputTooShort
from services.pipeline.html_renderer import looks_like_html, render_html, render_plain
from services.pipeline.issue_prioritizer import biggest_issue
from services.pipeline.report_builder import build_report
from services.pipeline.scorer import score
from services.pipeline.signal_detector import detect_signals
from services.profiles import ReviewProfile, get_profile
from services.text_normalizer import normalize

logger = logging.getLogger(__name__)

MAX_TARGET_ROLE_CHARS = 120
MIN_AI_REVIEW_CHARS = 200


def prepare(kind: str, text: str, app_settings: Settings) -> tuple[ReviewProfile, str]:
    """Resolve the profile, normalize and length-gate the input."""
    profile = get_profile(kind)
    normalized = normalize(text)
    if len(normalized) < app_settings.min_text_chars:
        raise InputTooShort(profile.noun, app_settings.min_text_chars)
    if len(normalized) > app_settings.max_text_chars:
        raise InputTooLong(profile.noun, app_settings.max_text_chars)
    return profile, normalized


def _run(profile: ReviewProfile, text: str, target_role: str, app_settings: Settings) -> Report:
    signals = detect_signals(text, target_role, profile)
    card = score(signals, profile)
    issue = biggest_issue(signals, profile)
    report = build_report(signals, card, issue, profile, mentor_name=app_settings.mentor_name)
    logger.info(
        "Reviewed %s: overall=%d readiness=%s sections=%d",
        profile.kind, card.overall, report.readiness, len(report.sections),
    )
    return report


def review(
    kind: str,
    text: str,
    target_role: str = "",
    app_settings: Settings | None = None,
) -> Report:
    """Run the heuristic review and return the structured Report."""
    app_settings = app_settings or default_settings
    profile, normalized = prepare(kind, text, app_settings)
    target_role = normalize(target_role)[:MAX_TARGET_ROLE_CHARS]
    return _run(profile, normalized, target_role, app_settings)


async def _ai_review_html(
    profile: ReviewProfile, text: str, target_role: str, app_settings: Settings
) -> str | None:
    html = await gemini_client.generate_text(
        prompt_builder.build_review_prompt(profile, text, target_role),
        system_instruction=prompt_builder.build_system_rules(profile, app_settings.mentor_name),
        api_key=app_settings.gemini_api_key,
        model=app_settings.gemini_model,
    )
    if not html or len(html) < MIN_AI_REVIEW_CHARS:
        return None
    if not looks_like_html(html):
        return render_plain(profile.title, html)
    return html


async def review_html(
    kind: str,
    text: str,
    target_role: str = "",
    app_settings: Settings | None = None,
) -> str:
    """Return the review as an HTML fragment, Gemini-written when configured."""
    app_settings = app_settings or default_settings
    profile, normalized = prepare(kind, text, app_settings)
    target_role = normalize(target_role)[:MAX_TARGET_ROLE_CHARS]

    if app_settings.review_engine == "gemini":
        html = await _ai_review_html(profile, normalized, target_role, app_settings)
        if html:
            return html
        logger.warning("Gemini review unavailable, using heuristic engine")

    return render_html(_run(profile, normalized, target_role, app_settings))
