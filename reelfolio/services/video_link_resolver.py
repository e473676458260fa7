import re

from reelfolio.models.video import VideoReference, VideoSource

_YOUTUBE_HOSTS = ("youtube.com", "youtu.be")
_DRIVE_HOST = "drive.google.com"

_YOUTUBE_ID = r"[A-Za-z0-9_-]{11}"
_YOUTUBE_PATTERNS = (
    re.compile(rf"(?:watch\?v=|youtu\.be/|embed/|v/)({_YOUTUBE_ID})"),
    re.compile(rf"^({_YOUTUBE_ID})\Z"),
)
_BARE_YOUTUBE_ID = _YOUTUBE_PATTERNS[1]

_DRIVE_PATTERNS = (
    re.compile(r"/file/d/([A-Za-z0-9_-]+)"),
    re.compile(r"id=([A-Za-z0-9_-]+)"),
    re.compile(r"/d/([A-Za-z0-9_-]+)"),
)

_YOUTUBE_THUMBNAIL = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"
_DRIVE_THUMBNAIL = "https://drive.google.com/thumbnail?id={video_id}&sz=w800"
_YOUTUBE_EMBED = "https://www.youtube.com/embed/{video_id}?autoplay=1&rel=0"
_DRIVE_EMBED = "https://drive.google.com/file/d/{video_id}/preview"


class VideoLinkResolver:
    """
    Turns a pasted YouTube / Google Drive link (or bare id) into a VideoReference.
    Total over str: anything unrecognised resolves to VideoSource.NONE.
    """

    def classify(self, link: str, fallback: VideoSource = VideoSource.NONE) -> VideoSource:
        if not link:
            return VideoSource.NONE
        if any(host in link for host in _YOUTUBE_HOSTS):
            return VideoSource.YOUTUBE
        if _DRIVE_HOST in link:
            return VideoSource.DRIVE
        # Legacy Drive-only fields send bare ids: no host, no path, no query.
        if fallback is not VideoSource.NONE and "/" not in link and "?" not in link:
            return fallback
        if _BARE_YOUTUBE_ID.match(link):
            return VideoSource.YOUTUBE
        return VideoSource.NONE

    def extract_youtube_id(self, link: str) -> str:
        for pattern in _YOUTUBE_PATTERNS:
            match = pattern.search(link)
            if match:
                return match.group(1)
        return ""

    def extract_drive_id(self, link: str) -> str:
        if "/" not in link and "?" not in link:
            return link
        for pattern in _DRIVE_PATTERNS:
            match = pattern.search(link)
            if match:
                return match.group(1)
        return link

    def extract_video_id(self, link: str, source: VideoSource) -> str:
        if not link:
            return ""
        if source is VideoSource.YOUTUBE:
            return self.extract_youtube_id(link)
        if source is VideoSource.DRIVE:
            return self.extract_drive_id(link)
        return ""

    def thumbnail_url(self, video_id: str, source: VideoSource) -> str:
        if not video_id:
            return ""
        if source is VideoSource.YOUTUBE:
            return _YOUTUBE_THUMBNAIL.format(video_id=video_id)
        if source is VideoSource.DRIVE:
            return _DRIVE_THUMBNAIL.format(video_id=video_id)
        return ""

    def embed_url(self, video_id: str, source: VideoSource) -> str:
        """Player URL for the portfolio lightbox."""
        if not video_id:
            return ""
        if source is VideoSource.YOUTUBE:
            return _YOUTUBE_EMBED.format(video_id=video_id)
        if source is VideoSource.DRIVE:
            return _DRIVE_EMBED.format(video_id=video_id)
        return ""

    def resolve(self, link: str, fallback: VideoSource = VideoSource.NONE) -> VideoReference:
        link = link or ""
        source = self.classify(link, fallback)
        video_id = self.extract_video_id(link, source)
        if not video_id:
            # A YouTube link without a usable id carries no video.
            return VideoReference(raw_input=link)
        return VideoReference(
            raw_input=link,
            source=source,
            video_id=video_id,
            thumbnail_url=self.thumbnail_url(video_id, source),
        )


_default_resolver = VideoLinkResolver()


def resolve(link: str, fallback: VideoSource = VideoSource.NONE) -> VideoReference:
    return _default_resolver.resolve(link, fallback)
