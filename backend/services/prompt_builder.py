"""All prompt templates for roast requests."""

from models.schemas.prompt_pair import PromptPair
from models.schemas.roast_request import SubjectKind, ToneLevel

SYSTEM_INSTRUCTIONS: dict[tuple[SubjectKind, ToneLevel], str] = {
    (SubjectKind.RESUME, ToneLevel.MILD): "You are a professional resume reviewer.",
    (SubjectKind.RESUME, ToneLevel.SPICY): "You are a brutally honest resume reviewer.",
    (SubjectKind.RESUME, ToneLevel.EXTRA_BURN): "You are a savage resume reviewer with maximum intensity.",
    (SubjectKind.PROJECT, ToneLevel.MILD): "You are an expert at reviewing and roasting project ideas.",
    (SubjectKind.PROJECT, ToneLevel.SPICY): "You are a brutally honest expert at roasting project ideas.",
    (SubjectKind.PROJECT, ToneLevel.EXTRA_BURN): (
        "You are a savage expert at roasting project ideas with maximum intensity."
    ),
}

_SUBJECT_NOUN = {
    SubjectKind.RESUME: "resume",
    SubjectKind.PROJECT: "project idea",
}

RESPONSE_FORMAT_INSTRUCTIONS = """Your response must follow this exact JSON format with the following fields:

{
  "roast": "A brutal overall roast (3-5 sentences max) highlighting the major flaws",
  "rating": "A rating out of 10",
  "keyIssues": ["Issue 1", "Issue 2", "Issue 3"],
  "actionItems": ["Action 1", "Action 2", "Action 3"]
}

Provide exactly 3 key issues and 3 action items. Keep your roast under 150 words. Be direct and savage."""


def build_system_instruction(subject_kind: SubjectKind, tone_level: "ToneLevel | str | None") -> str:
    return SYSTEM_INSTRUCTIONS[(subject_kind, ToneLevel.parse(tone_level))]


def build_user_instruction(
    subject_kind: SubjectKind,
    subject_text: str,
    project_link: str | None = None,
) -> str:
    """Fixed response-shape instructions followed by the subject payload.

    The payload is interpolated verbatim.
    """
    if subject_kind is SubjectKind.RESUME:
        payload = f"Resume Content:\n{subject_text}"
    else:
        payload = f"Project Description: {subject_text}\nProject Link: {project_link or ''}"

    return (
        f"Roast this {_SUBJECT_NOUN[subject_kind]} harshly. "
        f"{RESPONSE_FORMAT_INSTRUCTIONS}\n\n{payload}"
    )


def build_prompt(
    subject_kind: SubjectKind,
    tone_level: "ToneLevel | str | None",
    subject_text: str,
    project_link: str | None = None,
) -> PromptPair:
    return PromptPair(
        system_instruction=build_system_instruction(subject_kind, tone_level),
        user_instruction=build_user_instruction(subject_kind, subject_text, project_link),
    )
