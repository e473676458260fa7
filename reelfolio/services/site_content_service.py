import logging
from typing import Any

from pydantic import ValidationError

from reelfolio.repositories.site_content_repository import SiteContentRepository
from reelfolio.schemas.site_content import SECTION_ADAPTERS

logger = logging.getLogger(__name__)


class InvalidSiteContent(Exception):
    pass


class SiteContentService:
    def __init__(self, repository: SiteContentRepository) -> None:
        self._repository = repository

    def get_content(self) -> dict:
        return self._repository.read()

    def validate_section(self, section: str | None, data: Any) -> Any:
        """Return the section data normalised to its stored JSON form. Raises InvalidSiteContent."""
        if not section or not data:
            raise InvalidSiteContent("Section and data required")
        adapter = SECTION_ADAPTERS.get(section)
        if adapter is None:
            raise InvalidSiteContent(f"Unknown section: {section}")
        try:
            value = adapter.validate_python(data)
        except ValidationError as exc:
            raise InvalidSiteContent(f"Invalid data for section {section}: {exc.error_count()} error(s)") from exc
        return adapter.dump_python(value, mode="json", by_alias=True, exclude_none=True)

    def update_section(self, section: str | None, data: Any) -> None:
        value = self.validate_section(section, data)
        content = self._repository.read()
        content[section] = value
        self._repository.write(content)
        logger.info("[site-content] section updated | section=%s", section)
