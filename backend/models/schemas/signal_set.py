"""Detector output: every signal found in one normalized document."""

from pydantic import ConfigDict

from models.schemas.base import CamelModel


class RoleHit(CamelModel):
    """A role from the role table with the number of its keywords present."""
    model_config = ConfigDict(frozen=True)

    name: str
    hits: int = 0


class SignalSet(CamelModel):
    """Boolean and count signals for one request. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    target_role: str = ""
    target_role_given: bool = False
    target_role_aligned: bool = False

    # section key -> present (keys come from the review profile)
    sections: dict[str, bool] = {}

    has_email: bool = False
    has_phone: bool = False
    has_profile_link: bool = False

    detected_roles: list[RoleHit] = []
    multi_role_ambiguity: bool = False

    metrics_count: int = 0
    weak_words_count: int = 0
    weak_phrases: list[str] = []
    action_verb_count: int = 0
    tools_count: int = 0
    tools: list[str] = []
    bullet_count: int = 0
    word_count: int = 0
    long_line_count: int = 0

    @property
    def roles_detected(self) -> int:
        return len(self.detected_roles)

    @property
    def top_role(self) -> str:
        return self.detected_roles[0].name if self.detected_roles else ""

    def has_section(self, key: str) -> bool:
        return self.sections.get(key, False)
