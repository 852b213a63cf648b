import pytest

from m3u8reader import DEFAULT_REGISTRY, Tag, TagRegistry
from m3u8reader.handlers import (
    BASIC_TAGS,
    MASTER_PLAYLIST_TAGS,
    MEDIA_PLAYLIST_TAGS,
    MEDIA_SEGMENT_TAGS,
    parse_media,
    parse_sequence,
    parse_version,
)


def test_default_registry_covers_every_tag():
    assert set(DEFAULT_REGISTRY) == set(Tag)
    assert len(DEFAULT_REGISTRY) == 16


def test_families_are_disjoint():
    families = [BASIC_TAGS, MEDIA_SEGMENT_TAGS, MEDIA_PLAYLIST_TAGS, MASTER_PLAYLIST_TAGS]
    assert sum(len(family) for family in families) == len(DEFAULT_REGISTRY)


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY._handlers[Tag.VERSION] = None


def test_registry_does_not_follow_source_mapping():
    family = {Tag.VERSION: parse_version}
    registry = TagRegistry(family)
    family[Tag.MEDIA] = parse_media
    assert Tag.MEDIA not in registry


def test_last_family_wins():
    registry = TagRegistry({Tag.VERSION: parse_version}, {Tag.VERSION: parse_sequence})
    assert registry[Tag.VERSION] is parse_sequence


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("#EXT-X-VERSION:3\n", (Tag.VERSION, "3")),
        ("#EXTINF:10.5,a,b\r\n", (Tag.EXTINF, "10.5,a,b")),
        ("#EXT-X-DISCONTINUITY\n", (Tag.DISCONTINUITY, "")),
        ("#EXT-X-DISCONTINUITY ", (Tag.DISCONTINUITY, "")),
        ("#EXT-X-MEDIA-SEQUENCE:7", (Tag.MEDIA_SEQUENCE, "7")),
        ("#EXT-X-MEDIA:TYPE=AUDIO", (Tag.MEDIA, "TYPE=AUDIO")),
        ("#EXT-X-I-FRAME-STREAM-INF:URI=\"a\"", (Tag.I_FRAME_STREAM_INF, 'URI="a"')),
        ("#EXT-X-I-FRAMES-ONLY", (Tag.I_FRAMES_ONLY, "")),
        ("#EXT-X-PROGRAM-DATE-TIME:2010-02-19T14:54:23Z", (Tag.PROGRAM_DATE_TIME, "2010-02-19T14:54:23Z")),
    ],
)
def test_match(line, expected):
    assert DEFAULT_REGISTRY.match(line) == expected


@pytest.mark.parametrize(
    "line",
    ["#EXTM3U", "#EXT-X-ENDLIST", "#EXT-X-MEDIAX:1", "# comment", "segment.ts", "", "#EXT-X-VERSION3"],
)
def test_no_match(line):
    assert DEFAULT_REGISTRY.match(line) is None


def test_match_only_registered_tags():
    registry = TagRegistry(BASIC_TAGS)
    assert registry.match("#EXT-X-VERSION:2") == (Tag.VERSION, "2")
    assert registry.match("#EXTINF:10,") is None
