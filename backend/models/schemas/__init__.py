"""Pydantic contracts passed between roast pipeline stages."""

from models.schemas.prompt_pair import PromptPair
from models.schemas.provider_outcome import (
    ParseFailed,
    ParseOutcome,
    ParseSucceeded,
    ProviderFailure,
    ProviderOutcome,
    ProviderVerdict,
    RawContent,
    TerminalFailure,
)
from models.schemas.roast_request import RoastRequest, SubjectKind, ToneLevel

__all__ = [
    "PromptPair",
    "ParseFailed",
    "ParseOutcome",
    "ParseSucceeded",
    "ProviderFailure",
    "ProviderOutcome",
    "ProviderVerdict",
    "RawContent",
    "TerminalFailure",
    "RoastRequest",
    "SubjectKind",
    "ToneLevel",
]
