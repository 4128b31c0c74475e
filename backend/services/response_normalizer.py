"""Turn a provider outcome into a Verdict.

States:
    ProviderFailure          -> TerminalFailure (the only non-Verdict result)
    RawContent -> ParseSucceeded -> Verdict with the model's fields copied
               -> ParseFailed    -> fallback Verdict wrapping the raw text

The fallback keeps the model's text as the roast so nothing readable is lost,
and always carries three key issues and three action items.
"""

import json
import logging

from pydantic import ValidationError

from models.responses import Verdict
from models.schemas.provider_outcome import (
    ParseFailed,
    ParseOutcome,
    ParseSucceeded,
    ProviderFailure,
    ProviderOutcome,
    ProviderVerdict,
    TerminalFailure,
)
from models.schemas.roast_request import SubjectKind

logger = logging.getLogger(__name__)

FALLBACK_RATING = "N/A"

FALLBACK_KEY_ISSUES = (
    "Could not parse structured feedback",
    "Review the full roast for details",
    "Try submitting again for better results",
)

FALLBACK_ACTION_ITEMS: dict[SubjectKind, tuple[str, str, str]] = {
    SubjectKind.RESUME: (
        "Consider the points mentioned in the roast",
        "Submit a clearer resume format",
        "Use the roast feedback to make improvements",
    ),
    SubjectKind.PROJECT: (
        "Consider the points mentioned in the roast",
        "Provide clearer project details",
        "Use the roast feedback to improve your project",
    ),
}


def parse_content(raw: str) -> ParseOutcome:
    """Parse the model's message body as the requested JSON object.

    The body must be a JSON object as sent; a reply wrapped in a markdown
    code fence is not JSON and falls back like any other prose.
    """
    try:
        data = json.loads(raw)
    except ValueError:
        return ParseFailed(raw=raw)

    if not isinstance(data, dict):
        return ParseFailed(raw=raw)

    try:
        return ParseSucceeded(payload=ProviderVerdict.model_validate(data))
    except ValidationError as e:
        logger.debug("Provider JSON does not match the verdict shape: %s", e)
        return ParseFailed(raw=raw)


def fallback_verdict(subject_kind: SubjectKind, raw: str) -> Verdict:
    return Verdict(
        title=subject_kind.verdict_title,
        roast=raw,
        rating=FALLBACK_RATING,
        key_issues=list(FALLBACK_KEY_ISSUES),
        action_items=list(FALLBACK_ACTION_ITEMS[subject_kind]),
    )


def normalize(subject_kind: SubjectKind, outcome: ProviderOutcome) -> Verdict | TerminalFailure:
    """Total: never raises, whatever the provider sent."""
    if isinstance(outcome, ProviderFailure):
        return TerminalFailure(cause=outcome)

    parsed = parse_content(outcome.content)
    if isinstance(parsed, ParseFailed):
        logger.warning("Provider reply was not the requested JSON, using fallback verdict")
        return fallback_verdict(subject_kind, parsed.raw)

    payload = parsed.payload
    return Verdict(
        title=subject_kind.verdict_title,
        roast=payload.roast,
        rating=payload.rating,
        key_issues=payload.key_issues,
        action_items=payload.action_items,
    )
