from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel


class HeroContent(BaseModel):
    title: str | None = None
    tagline: str | None = None
    status: str | None = None


class AboutContent(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    headline: str | None = None
    subtitle: str | None = None
    bio1: str | None = None
    bio2: str | None = None
    tools: list[str] | None = None
    experience: str | None = None
    photo_url: str | None = None


class ServiceItem(BaseModel):
    title: str
    description: str
    tools: list[str] = []


class ContactContent(BaseModel):
    email: str | None = None
    availability: str | None = None


class SocialLinks(BaseModel):
    instagram: str | None = None
    twitter: str | None = None
    linkedin: str | None = None
    youtube: str | None = None


SECTION_ADAPTERS: dict[str, TypeAdapter] = {
    "hero": TypeAdapter(HeroContent),
    "about": TypeAdapter(AboutContent),
    "services": TypeAdapter(list[ServiceItem]),
    "clients": TypeAdapter(list[str]),
    "contact": TypeAdapter(ContactContent),
    "social": TypeAdapter(SocialLinks),
}


class SiteContentUpdateRequest(BaseModel):
    section: str | None = None
    data: Any = None
