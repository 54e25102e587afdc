"""Input text cleanup shared by both review kinds."""

import re

_TRAILING_WS_RE = re.compile(r"[ \t]+\n")
_BLANK_RUN_RE = re.compile(r"\n{3,}")
_EXTRACTED_WS_RE = re.compile(r"\s+\n")


def normalize(text: str) -> str:
    """Remove NULs, strip trailing spaces, collapse blank-line runs, trim.

    Idempotent: normalize(normalize(t)) == normalize(t).
    """
    if not text:
        return ""
    text = text.replace("\x00", "")
    text = _TRAILING_WS_RE.sub("\n", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def clean_extracted(text: str) -> str:
    """Tidy text pulled out of a PDF before it is shown back to the user."""
    return normalize(_EXTRACTED_WS_RE.sub("\n", text or ""))
