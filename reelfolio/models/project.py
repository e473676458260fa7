from dataclasses import dataclass, field

from reelfolio.models.video import VideoSource

PROJECT_TYPES = ("longForm", "shortForm")


@dataclass
class Project:
    id: str
    title: str
    category: str
    year: str
    thumbnail_url: str
    video_id: str = ""
    video_source: VideoSource = VideoSource.NONE
    # Legacy field from the Drive-only era; kept so older frontends still play.
    drive_video_id: str | None = None

    @property
    def stored_video_id(self) -> str:
        return self.video_id or self.drive_video_id or ""

    def to_record(self) -> dict:
        record = {
            "id": self.id,
            "title": self.title,
            "category": self.category,
            "year": self.year,
            "thumbnailUrl": self.thumbnail_url,
            "videoId": self.video_id,
            "videoSource": self.video_source.to_wire(),
        }
        if self.drive_video_id:
            record["driveVideoId"] = self.drive_video_id
        return record

    @classmethod
    def from_record(cls, record: dict) -> "Project":
        return cls(
            id=str(record.get("id", "")),
            title=record.get("title") or "",
            category=record.get("category") or "",
            year=str(record.get("year") or ""),
            thumbnail_url=record.get("thumbnailUrl") or "",
            video_id=record.get("videoId") or "",
            video_source=VideoSource.from_wire(record.get("videoSource")),
            drive_video_id=record.get("driveVideoId") or None,
        )


@dataclass
class ProjectsData:
    long_form: list[Project] = field(default_factory=list)
    short_form: list[Project] = field(default_factory=list)

    def of_type(self, project_type: str) -> list[Project]:
        if project_type == "longForm":
            return self.long_form
        if project_type == "shortForm":
            return self.short_form
        raise KeyError(project_type)

    def to_record(self) -> dict:
        return {
            "longForm": [p.to_record() for p in self.long_form],
            "shortForm": [p.to_record() for p in self.short_form],
        }

    @classmethod
    def from_record(cls, record: dict) -> "ProjectsData":
        return cls(
            long_form=[Project.from_record(r) for r in record.get("longForm") or []],
            short_form=[Project.from_record(r) for r in record.get("shortForm") or []],
        )
