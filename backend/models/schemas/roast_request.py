"""Inbound roast submission, normalized from either HTTP route."""

from enum import Enum

from pydantic import BaseModel


class SubjectKind(str, Enum):
    RESUME = "resume"
    PROJECT = "project"

    @property
    def verdict_title(self) -> str:
        return "Resume Roast" if self is SubjectKind.RESUME else "Project Roast"


class ToneLevel(str, Enum):
    """Escalating bluntness of the reviewer persona."""

    MILD = "mild"
    SPICY = "spicy"
    EXTRA_BURN = "extra_burn"

    @classmethod
    def parse(cls, value: "str | ToneLevel | None") -> "ToneLevel":
        """Map a raw ``roastLevel`` value to a tone; anything unknown is mild."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.MILD


class RoastRequest(BaseModel):
    """One submission. Resume carries document bytes, project carries text + link.

    The pairing is checked by the pipeline, not here, so that a bad
    submission turns into a 400 with a readable message.
    """
    subject_kind: SubjectKind
    tone_level: ToneLevel = ToneLevel.MILD
    text: str | None = None
    document_bytes: bytes | None = None
    document_format: str | None = None  # lower-cased filename extension
    project_link: str | None = None
