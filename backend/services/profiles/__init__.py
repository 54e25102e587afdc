"""Review profile registry: one configuration object per document kind."""

from services.errors import PreconditionViolation
from services.profiles.base import ReviewProfile
from services.profiles.linkedin import LINKEDIN_PROFILE
from services.profiles.resume import RESUME_PROFILE

_registry: dict[str, ReviewProfile] = {
    RESUME_PROFILE.kind: RESUME_PROFILE,
    LINKEDIN_PROFILE.kind: LINKEDIN_PROFILE,
}


def get_profile(kind: str) -> ReviewProfile:
    """Look up the profile for a document kind."""
    try:
        return _registry[kind]
    except KeyError:
        raise PreconditionViolation(f"Unknown review kind: {kind}") from None


def available_kinds() -> list[str]:
    return sorted(_registry)


__all__ = ["ReviewProfile", "available_kinds", "get_profile"]
