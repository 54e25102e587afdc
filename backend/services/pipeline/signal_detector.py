"""Stage 1: detect sections, roles and quantitative signals in normalized text.

Every detector degrades to False/0 when nothing matches; this stage never
raises on user input.
"""

import re
from functools import lru_cache

from models.schemas.signal_set import RoleHit, SignalSet
from services.pdf_parser import is_bullet, starts_with_action_verb
from services.profiles import ReviewProfile

# Contact info patterns
EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+\.[\w.-]+")
PHONE_RE = re.compile(r"(?:\+?\d{1,2}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}\b")
PROFILE_LINK_RE = re.compile(r"(?:linkedin\.com/in|github\.com)/[\w-]+", re.IGNORECASE)

LONG_LINE_CHARS = 220

# Ambiguity: at least this many roles, with the top and third this close
MULTI_ROLE_MIN_ROLES = 3
MULTI_ROLE_MAX_GAP = 2


@lru_cache(maxsize=512)
def _keyword_re(keyword: str) -> re.Pattern:
    """Case-insensitive whole-token match; works for c++, gd&t, b.s. and |."""
    return re.compile(
        rf"(?<![a-z0-9]){re.escape(keyword)}(?![a-z0-9])", re.IGNORECASE
    )


def has_keyword(text: str, keyword: str) -> bool:
    return _keyword_re(keyword).search(text) is not None


def count_keyword(text: str, keyword: str) -> int:
    return len(_keyword_re(keyword).findall(text))


def keywords_present(text: str, keywords: tuple[str, ...]) -> list[str]:
    """Keywords found in text, in table order, without duplicates."""
    found: list[str] = []
    for kw in keywords:
        if kw not in found and has_keyword(text, kw):
            found.append(kw)
    return found


def detect_sections(text: str, profile: ReviewProfile) -> dict[str, bool]:
    return {
        section: any(has_keyword(text, kw) for kw in keywords)
        for section, keywords in profile.section_keywords.items()
    }


def detect_roles(text: str, profile: ReviewProfile) -> list[RoleHit]:
    """Roles with at least one keyword hit, most hits first.

    sorted() is stable, so equal counts keep role-table order.
    """
    hits = [
        RoleHit(name=name, hits=len(keywords_present(text, keywords)))
        for name, keywords in profile.role_keywords
    ]
    return sorted((h for h in hits if h.hits > 0), key=lambda h: h.hits, reverse=True)


def is_multi_role(roles: list[RoleHit]) -> bool:
    if len(roles) < MULTI_ROLE_MIN_ROLES:
        return False
    return roles[0].hits - roles[MULTI_ROLE_MIN_ROLES - 1].hits <= MULTI_ROLE_MAX_GAP


def target_role_aligned(
    target_role: str, roles: list[RoleHit], profile: ReviewProfile
) -> bool:
    """True when the target role names a detected role or one of its keywords."""
    if not target_role or not roles:
        return False
    detected = {r.name for r in roles}
    for name, keywords in profile.role_keywords:
        if name not in detected:
            continue
        if has_keyword(target_role, name) or any(has_keyword(target_role, kw) for kw in keywords):
            return True
    return False


def detect_signals(text: str, target_role: str, profile: ReviewProfile) -> SignalSet:
    """Build the SignalSet for one normalized document."""
    target_role = (target_role or "").strip()
    lines = [line for line in text.split("\n") if line.strip()]

    roles = detect_roles(text, profile)
    weak_found = keywords_present(text, profile.weak_phrases)
    tools = keywords_present(text, profile.tool_keywords)

    return SignalSet(
        target_role=target_role,
        target_role_given=bool(target_role),
        target_role_aligned=target_role_aligned(target_role, roles, profile),
        sections=detect_sections(text, profile),
        has_email=EMAIL_RE.search(text) is not None,
        has_phone=PHONE_RE.search(text) is not None,
        has_profile_link=PROFILE_LINK_RE.search(text) is not None,
        detected_roles=roles,
        multi_role_ambiguity=profile.detect_multi_role and is_multi_role(roles),
        metrics_count=len(profile.metrics_pattern.findall(text)),
        weak_words_count=sum(count_keyword(text, p) for p in weak_found),
        weak_phrases=weak_found,
        action_verb_count=sum(1 for line in lines if starts_with_action_verb(line)),
        tools_count=len(tools),
        tools=tools,
        bullet_count=sum(1 for line in lines if is_bullet(line)),
        word_count=len(text.split()),
        long_line_count=sum(1 for line in lines if len(line) > LONG_LINE_CHARS),
    )
