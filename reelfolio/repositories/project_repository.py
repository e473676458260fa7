import logging

from reelfolio.models.project import ProjectsData
from reelfolio.repositories.base import AbstractBlobStore

logger = logging.getLogger(__name__)

PROJECTS_BLOB_KEY = "projects.json"


class ProjectRepository:
    def __init__(self, store: AbstractBlobStore) -> None:
        self._store = store

    def read_all(self) -> ProjectsData:
        """
        Load the project gallery. A missing or unreadable blob yields an empty gallery
        so the public site keeps rendering.
        """
        try:
            record = self._store.read_json(PROJECTS_BLOB_KEY)
            if not isinstance(record, dict):
                return ProjectsData()
            return ProjectsData.from_record(record)
        except Exception as exc:
            logger.warning("[projects] read failed, using defaults | error=%s", exc)
            return ProjectsData()

    def write_all(self, projects: ProjectsData) -> None:
        self._store.write_json(PROJECTS_BLOB_KEY, projects.to_record())
