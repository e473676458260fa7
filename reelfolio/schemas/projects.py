from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectCreateRequest(_CamelModel):
    project_type: Literal["longForm", "shortForm"] = Field(alias="type")
    title: str
    category: str | None = None
    year: str | None = None
    thumbnail_url: str | None = None
    video_link: str | None = None
    drive_video_link: str | None = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("title must not be empty")
        return v


class ProjectUpdateRequest(_CamelModel):
    title: str | None = None
    category: str | None = None
    year: str | None = None
    thumbnail_url: str | None = None
    video_link: str | None = None
    drive_video_link: str | None = None

    @property
    def link_supplied(self) -> bool:
        return bool({"video_link", "drive_video_link"} & self.model_fields_set)


class ProjectCreatedResponse(BaseModel):
    success: bool = True
    project: dict


class SuccessResponse(BaseModel):
    success: bool = True


class VideoPreviewResponse(_CamelModel):
    video_id: str
    video_source: Literal["youtube", "drive"] | None
    thumbnail_url: str
    embed_url: str
