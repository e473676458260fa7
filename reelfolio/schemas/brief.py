from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class BriefRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    client_name: str
    project_type: str
    description: str

    @field_validator("client_name", "project_type", "description")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class CreativeBrief(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: str = Field(description="A professional summary of the project vision.")
    mood_board_suggestions: list[str] = Field(description="List of visual style keywords.")
    estimated_timeline: str = Field(description="Estimated duration of the project.")
    technical_requirements: list[str] = Field(description="List of technical needs.")
