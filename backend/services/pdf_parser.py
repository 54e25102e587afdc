import io
import re

import pdfplumber

# Bullet markers: standard + expanded unicode set
BULLET_MARKERS = frozenset("•-–—►▪✓*○◆⚫→▸▹◇■□●")

# Strong action verbs for bullet quality checks
ACTION_VERBS = frozenset({
    "achieved", "administered", "advanced", "analyzed", "architected",
    "assembled", "automated", "built", "calibrated", "collaborated",
    "conducted", "configured", "consolidated", "contributed", "coordinated",
    "created", "cut", "debugged", "decreased", "delivered", "deployed",
    "designed", "developed", "directed", "drove", "eliminated", "enabled",
    "engineered", "enhanced", "established", "evaluated", "executed",
    "expanded", "fabricated", "facilitated", "founded", "generated", "grew",
    "identified", "implemented", "improved", "increased", "influenced",
    "initiated", "innovated", "integrated", "introduced", "launched", "led",
    "leveraged", "machined", "maintained", "managed", "measured", "mentored",
    "migrated", "modeled", "modernized", "negotiated", "optimized",
    "orchestrated", "organized", "overhauled", "partnered", "performed",
    "pioneered", "planned", "presented", "processed", "produced",
    "programmed", "proposed", "prototyped", "published", "rebuilt",
    "reduced", "refactored", "refined", "remodeled", "resolved",
    "restructured", "revamped", "scaled", "secured", "simplified",
    "simulated", "spearheaded", "standardized", "streamlined",
    "strengthened", "supervised", "surpassed", "tested", "trained",
    "transformed", "tripled", "upgraded", "validated", "wrote",
})

_NUMBERED_RE = re.compile(r"^\d{1,2}[.)]\s")


def extract_pages(pdf_bytes: bytes) -> list[str]:
    """Extract text per page from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def is_bullet(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    return stripped[0] in BULLET_MARKERS or bool(_NUMBERED_RE.match(stripped))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker or "1." / "1)" numbering."""
    stripped = line.strip()
    if stripped and stripped[0] in BULLET_MARKERS:
        return stripped.lstrip("".join(BULLET_MARKERS) + " ").strip()
    return re.sub(r"^\d{1,2}[.)]\s*", "", stripped).strip()


def starts_with_action_verb(line: str) -> bool:
    words = strip_bullet(line).split()
    if not words:
        return False
    return words[0].lower().strip(",.;:") in ACTION_VERBS
