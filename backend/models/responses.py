from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Verdict(BaseModel):
    """Canonical roast result, serialized with camelCase keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    roast: str
    rating: str
    key_issues: list[str]
    action_items: list[str]


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    provider_configured: bool = False
