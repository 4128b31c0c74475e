"""Completion Client and Response Normalizer contracts.

ProviderOutcome is what one provider call produced; ParseOutcome is what the
normalizer made of the raw content. Both are closed two-variant unions.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RawContent(BaseModel):
    """The provider's free-form message body."""
    kind: Literal["raw_content"] = "raw_content"
    content: str


class ProviderFailure(BaseModel):
    """Transport failure (no usable HTTP exchange) or provider failure
    (non-2xx, or an envelope without a message body)."""
    kind: Literal["transport", "provider"]
    detail: str = ""


ProviderOutcome = RawContent | ProviderFailure


class ProviderVerdict(BaseModel):
    """The JSON object the prompt asks the model to return.

    Types are checked; list lengths and word counts are not.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    roast: str
    rating: str
    key_issues: list[str]
    action_items: list[str]

    @field_validator("rating", mode="before")
    @classmethod
    def _stringify_numeric_rating(cls, value):
        # models often answer "rating": 7 instead of "7/10"
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ParseSucceeded(BaseModel):
    payload: ProviderVerdict


class ParseFailed(BaseModel):
    raw: str


ParseOutcome = ParseSucceeded | ParseFailed


class TerminalFailure(BaseModel):
    """Normalizer result when there is no content to normalize."""
    cause: ProviderFailure
