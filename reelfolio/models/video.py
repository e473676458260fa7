from dataclasses import dataclass
from enum import Enum


class VideoSource(str, Enum):
    NONE = "none"
    YOUTUBE = "youtube"
    DRIVE = "drive"

    def to_wire(self) -> str | None:
        """Stored/JSON form: "youtube", "drive" or None."""
        return None if self is VideoSource.NONE else self.value

    @classmethod
    def from_wire(cls, value: str | None) -> "VideoSource":
        if not value:
            return cls.NONE
        try:
            return cls(value)
        except ValueError:
            return cls.NONE


@dataclass(frozen=True)
class VideoReference:
    raw_input: str
    source: VideoSource = VideoSource.NONE
    video_id: str = ""
    thumbnail_url: str = ""

    @property
    def has_video(self) -> bool:
        return self.source is not VideoSource.NONE and bool(self.video_id)
