import json
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator


class DocumentKind(str, Enum):
    resume = "resume"
    linkedin = "linkedin"


class OutputFormat(str, Enum):
    json = "json"
    html = "html"


class ReviewRequest(BaseModel):
    text: str = Field(
        "",
        validation_alias=AliasChoices("text", "resumeText", "linkedinText"),
        description="Pasted or extracted document text",
    )
    target_role: str = Field(
        "",
        validation_alias=AliasChoices("targetRole", "target_role"),
        description="Optional role the document is aimed at",
    )

    @field_validator("text", "target_role", mode="before")
    @classmethod
    def non_string_as_empty(cls, value):
        # null, numbers, lists: that field only becomes empty
        return value if isinstance(value, str) else ""

    @classmethod
    def from_body(cls, raw: bytes) -> "ReviewRequest":
        """Parse a request body leniently.

        Malformed JSON or a non-object payload become empty fields, so the
        caller gets the length-gate message instead of a parse error.
        """
        try:
            payload = json.loads(raw or b"{}")
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_validate(payload)
