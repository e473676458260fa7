import logging
import threading
import time
from collections.abc import Collection
from datetime import datetime, timezone

from reelfolio.models.project import PROJECT_TYPES, Project, ProjectsData
from reelfolio.models.video import VideoReference, VideoSource
from reelfolio.repositories.project_repository import ProjectRepository
from reelfolio.schemas.projects import ProjectCreateRequest, ProjectUpdateRequest
from reelfolio.services.video_link_resolver import VideoLinkResolver

logger = logging.getLogger(__name__)

PLACEHOLDER_THUMBNAIL = "https://picsum.photos/800/450?grayscale"
DEFAULT_CATEGORY = "Uncategorized"

_ID_PREFIXES = {"longForm": "lf", "shortForm": "sf"}
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


class ProjectNotFound(Exception):
    pass


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id(project_type: str, taken: Collection[str] = frozenset()) -> str:
    """Prefix plus base-36 millisecond timestamp, bumped past ids already in the gallery."""
    millis = int(time.time() * 1000)
    project_id = f"{_ID_PREFIXES[project_type]}-{_to_base36(millis)}"
    while project_id in taken:
        millis += 1
        project_id = f"{_ID_PREFIXES[project_type]}-{_to_base36(millis)}"
    return project_id


class ProjectService:
    def __init__(self, repository: ProjectRepository, resolver: VideoLinkResolver | None = None) -> None:
        self._repository = repository
        self._resolver = resolver or VideoLinkResolver()
        # Serialises read-modify-write cycles within this process only.
        self._lock = threading.Lock()

    def _resolve_link(self, video_link: str | None, drive_video_link: str | None) -> VideoReference:
        if video_link:
            return self._resolver.resolve(video_link)
        if drive_video_link:
            return self._resolver.resolve(drive_video_link, fallback=VideoSource.DRIVE)
        return self._resolver.resolve("")

    def list_projects(self) -> ProjectsData:
        return self._repository.read_all()

    def create_project(self, payload: ProjectCreateRequest) -> Project:
        video = self._resolve_link(payload.video_link, payload.drive_video_link)
        thumbnail = payload.thumbnail_url or video.thumbnail_url or PLACEHOLDER_THUMBNAIL

        with self._lock:
            projects = self._repository.read_all()
            taken = {p.id for t in PROJECT_TYPES for p in projects.of_type(t)}
            project = Project(
                id=generate_id(payload.project_type, taken),
                title=payload.title,
                category=payload.category or DEFAULT_CATEGORY,
                year=payload.year or str(datetime.now(timezone.utc).year),
                thumbnail_url=thumbnail,
                video_id=video.video_id,
                video_source=video.source,
                drive_video_id=video.video_id if video.source is VideoSource.DRIVE else None,
            )
            projects.of_type(payload.project_type).append(project)
            self._repository.write_all(projects)

        logger.info(
            "[projects] created | id=%s | type=%s | source=%s",
            project.id,
            payload.project_type,
            video.source.value,
        )
        return project

    def _apply_update(self, existing: Project, payload: ProjectUpdateRequest) -> Project:
        updated = Project(
            id=existing.id,
            title=payload.title or existing.title,
            category=payload.category or existing.category,
            year=payload.year or existing.year,
            thumbnail_url=existing.thumbnail_url,
            video_id=existing.video_id,
            video_source=existing.video_source,
            drive_video_id=existing.drive_video_id,
        )

        if payload.link_supplied:
            video = self._resolve_link(payload.video_link, payload.drive_video_link)
            if video.video_id and video.video_id != existing.stored_video_id:
                updated.thumbnail_url = video.thumbnail_url
            updated.video_id = video.video_id
            updated.video_source = video.source
            if video.source is VideoSource.DRIVE:
                updated.drive_video_id = video.video_id

        if payload.thumbnail_url:
            updated.thumbnail_url = payload.thumbnail_url
        return updated

    def update_project(self, project_id: str, payload: ProjectUpdateRequest) -> Project:
        with self._lock:
            projects = self._repository.read_all()
            for project_type in PROJECT_TYPES:
                items = projects.of_type(project_type)
                for index, existing in enumerate(items):
                    if existing.id != project_id:
                        continue
                    items[index] = self._apply_update(existing, payload)
                    self._repository.write_all(projects)
                    logger.info("[projects] updated | id=%s | type=%s", project_id, project_type)
                    return items[index]
        raise ProjectNotFound(project_id)

    def delete_project(self, project_id: str) -> None:
        with self._lock:
            projects = self._repository.read_all()
            for project_type in PROJECT_TYPES:
                items = projects.of_type(project_type)
                for index, existing in enumerate(items):
                    if existing.id == project_id:
                        del items[index]
                        self._repository.write_all(projects)
                        logger.info("[projects] deleted | id=%s | type=%s", project_id, project_type)
                        return
        raise ProjectNotFound(project_id)
