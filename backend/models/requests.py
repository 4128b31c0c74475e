from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class ProjectRoastRequest(BaseModel):
    """JSON body of ``POST /api/roast-project``.

    Both text fields are optional here so a missing one reaches the pipeline
    and comes back as a 400 with a readable message.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_description: str | None = None
    project_link: str | None = None
    roast_level: str | None = None

    @field_validator("roast_level", mode="before")
    @classmethod
    def _ignore_non_string_level(cls, value):
        # unknown levels, whatever their JSON type, fall back to mild
        return value if isinstance(value, str) else None
