"""Prompt Builder output: the two messages sent to the completion provider."""

from pydantic import BaseModel, ConfigDict


class PromptPair(BaseModel):
    model_config = ConfigDict(frozen=True)

    system_instruction: str
    user_instruction: str
