import pytest

from reelfolio.models.video import VideoSource
from reelfolio.services.video_link_resolver import VideoLinkResolver, resolve

RICK = "dQw4w9WgXcQ"


@pytest.fixture
def resolver():
    return VideoLinkResolver()


def test_empty_input_has_no_video(resolver):
    ref = resolver.resolve("")
    assert ref.source is VideoSource.NONE
    assert ref.video_id == ""
    assert ref.thumbnail_url == ""


def test_none_input_treated_as_empty(resolver):
    ref = resolver.resolve(None)
    assert ref.source is VideoSource.NONE
    assert ref.raw_input == ""


def test_bare_youtube_id(resolver):
    ref = resolver.resolve(RICK)
    assert ref.source is VideoSource.YOUTUBE
    assert ref.video_id == RICK
    assert ref.thumbnail_url == f"https://img.youtube.com/vi/{RICK}/maxresdefault.jpg"


@pytest.mark.parametrize(
    "link",
    [
        f"https://youtu.be/{RICK}",
        f"https://www.youtube.com/watch?v={RICK}&t=5",
        f"https://www.youtube.com/embed/{RICK}",
        f"https://www.youtube.com/v/{RICK}",
        f"youtube.com/watch?v={RICK}",
    ],
)
def test_youtube_links(resolver, link):
    ref = resolver.resolve(link)
    assert ref.source is VideoSource.YOUTUBE
    assert ref.video_id == RICK
    assert ref.raw_input == link


def test_youtube_link_without_id_has_no_video(resolver):
    ref = resolver.resolve("https://www.youtube.com/@some-channel")
    assert ref.source is VideoSource.NONE
    assert ref.video_id == ""
    assert ref.thumbnail_url == ""


def test_drive_file_link(resolver):
    ref = resolver.resolve("https://drive.google.com/file/d/1A2B3C4D5E/view")
    assert ref.source is VideoSource.DRIVE
    assert ref.video_id == "1A2B3C4D5E"
    assert ref.thumbnail_url == "https://drive.google.com/thumbnail?id=1A2B3C4D5E&sz=w800"


def test_drive_open_id_link(resolver):
    ref = resolver.resolve("https://drive.google.com/open?id=abc_DEF-123")
    assert ref.video_id == "abc_DEF-123"


def test_drive_uc_link_uses_id_param(resolver):
    ref = resolver.resolve("https://drive.google.com/uc?export=download&id=xyz987")
    assert ref.video_id == "xyz987"


def test_drive_link_without_id_passes_through(resolver):
    link = "https://drive.google.com/drive/folders"
    ref = resolver.resolve(link)
    assert ref.source is VideoSource.DRIVE
    assert ref.video_id == link


def test_bare_drive_id_not_auto_detected(resolver):
    ref = resolver.resolve("1A2B3C4D5E")
    assert ref.source is VideoSource.NONE
    assert ref.video_id == ""


def test_bare_drive_id_with_drive_fallback(resolver):
    ref = resolver.resolve("1A2B3C4D5E", fallback=VideoSource.DRIVE)
    assert ref.source is VideoSource.DRIVE
    assert ref.video_id == "1A2B3C4D5E"
    assert ref.thumbnail_url == "https://drive.google.com/thumbnail?id=1A2B3C4D5E&sz=w800"


def test_drive_fallback_wins_over_bare_youtube_rule(resolver):
    ref = resolver.resolve(RICK, fallback=VideoSource.DRIVE)
    assert ref.source is VideoSource.DRIVE


def test_drive_fallback_does_not_override_youtube_host(resolver):
    ref = resolver.resolve(f"https://youtu.be/{RICK}", fallback=VideoSource.DRIVE)
    assert ref.source is VideoSource.YOUTUBE


def test_unrelated_url(resolver):
    ref = resolver.resolve("https://example.com/video")
    assert (ref.source, ref.video_id, ref.thumbnail_url) == (VideoSource.NONE, "", "")


def test_youtube_wins_tie(resolver):
    link = f"https://www.youtube.com/watch?v={RICK}&ref=drive.google.com"
    assert resolver.classify(link) is VideoSource.YOUTUBE


def test_bare_youtube_id_round_trip(resolver):
    first = resolver.resolve(f"https://www.youtube.com/watch?v={RICK}")
    again = resolver.resolve(first.video_id)
    assert again.video_id == first.video_id
    assert again.source is VideoSource.YOUTUBE


@pytest.mark.parametrize(
    "link",
    ["", RICK, "https://example.com", "https://drive.google.com/file/d/abc/view", "https://youtube.com/"],
)
def test_thumbnail_present_only_with_video(resolver, link):
    ref = resolver.resolve(link)
    assert bool(ref.thumbnail_url) == (ref.source is not VideoSource.NONE and bool(ref.video_id))
    if ref.source is VideoSource.NONE:
        assert ref.video_id == ""


def test_thumbnail_empty_without_source(resolver):
    assert resolver.thumbnail_url("abc", VideoSource.NONE) == ""
    assert resolver.thumbnail_url("", VideoSource.YOUTUBE) == ""


def test_embed_urls(resolver):
    assert resolver.embed_url(RICK, VideoSource.YOUTUBE) == f"https://www.youtube.com/embed/{RICK}?autoplay=1&rel=0"
    assert resolver.embed_url("1A2B", VideoSource.DRIVE) == "https://drive.google.com/file/d/1A2B/preview"
    assert resolver.embed_url("1A2B", VideoSource.NONE) == ""


def test_module_level_resolve():
    assert resolve(f"https://youtu.be/{RICK}").video_id == RICK


def test_bare_youtube_id_with_trailing_newline_not_matched(resolver):
    ref = resolver.resolve(f"{RICK}\n")
    assert (ref.source, ref.video_id, ref.thumbnail_url) == (VideoSource.NONE, "", "")
    assert resolver.extract_youtube_id(f"{RICK}\n") == ""


def test_drive_fallback_ignores_foreign_urls(resolver):
    ref = resolver.resolve("https://example.com/video", fallback=VideoSource.DRIVE)
    assert (ref.source, ref.video_id, ref.thumbnail_url) == (VideoSource.NONE, "", "")


def test_drive_fallback_ignores_query_strings(resolver):
    assert resolver.classify("watch?clip=1", fallback=VideoSource.DRIVE) is VideoSource.NONE
