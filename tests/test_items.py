import pytest

from m3u8reader import (
    ByteRange,
    KeyItem,
    MapItem,
    MediaItem,
    PlaylistItem,
    SessionDataItem,
    TimeItem,
)


def test_byterange_with_offset():
    byterange = ByteRange.parse("4500@600")
    assert byterange == ByteRange(length=4500, start=600)
    assert str(byterange) == "4500@600"


def test_byterange_without_offset():
    byterange = ByteRange.parse("4500")
    assert byterange.start is None
    assert str(byterange) == "4500"


def test_byterange_strict():
    with pytest.raises(ValueError):
        ByteRange.parse("lots@0", strict=True)


def test_key_item():
    item = KeyItem.parse(
        'METHOD=SAMPLE-AES,URI="skd://key",IV=0x1234,'
        'KEYFORMAT="com.apple.streamingkeydelivery",KEYFORMATVERSIONS="1"'
    )
    assert item == KeyItem(
        method="SAMPLE-AES",
        uri="skd://key",
        iv="0x1234",
        key_format="com.apple.streamingkeydelivery",
        key_format_versions="1",
    )
    assert item.kind == "key"


def test_map_item():
    item = MapItem.parse('URI="init.mp4",BYTERANGE="720@0"')
    assert item.uri == "init.mp4"
    assert item.byterange == ByteRange(720, 0)

    assert MapItem.parse('URI="init.mp4"').byterange is None


def test_session_data_item():
    item = SessionDataItem.parse('DATA-ID="com.example.title",VALUE="My Title",LANGUAGE="en"')
    assert item.data_id == "com.example.title"
    assert item.value == "My Title"
    assert item.uri is None
    assert item.language == "en"


def test_media_item():
    item = MediaItem.parse(
        'TYPE=SUBTITLES,GROUP-ID="subs",NAME="Deutsch",LANGUAGE="de",'
        'AUTOSELECT=YES,DEFAULT=NO,FORCED=MAYBE,URI="de/subs.m3u8",'
        'CHARACTERISTICS="public.accessibility.transcribes-spoken-dialog"'
    )
    assert item.type == "SUBTITLES"
    assert item.group_id == "subs"
    assert item.name == "Deutsch"
    assert item.autoselect is True
    assert item.default is False
    assert item.forced is None
    assert item.uri == "de/subs.m3u8"
    assert item.characteristics == "public.accessibility.transcribes-spoken-dialog"


def test_time_item():
    item = TimeItem.parse("2010-02-19T14:54:23Z")
    assert item.time.year == 2010
    assert item.time.utcoffset().total_seconds() == 0


def test_playlist_item():
    item = PlaylistItem.parse(
        'PROGRAM-ID=1,BANDWIDTH=540,AVERAGE-BANDWIDTH=500,CODECS="avc1.66.30,mp4a.40.2",'
        'RESOLUTION=1920x1080,FRAME-RATE=23.976,AUDIO="aac",HDCP-LEVEL=TYPE-0'
    )
    assert item.program_id == 1
    assert item.bandwidth == 540
    assert item.average_bandwidth == 500
    assert item.codecs == "avc1.66.30,mp4a.40.2"
    assert (item.width, item.height) == (1920, 1080)
    assert item.resolution == "1920x1080"
    assert item.frame_rate == 23.976
    assert item.audio == "aac"
    assert item.hdcp_level == "TYPE-0"
    assert item.uri is None
    assert item.iframe is False
    assert item.kind == "stream"


def test_iframe_playlist_item():
    item = PlaylistItem.parse('BANDWIDTH=128000,URI="iframe.m3u8"', iframe=True)
    assert item.uri == "iframe.m3u8"
    assert item.iframe is True
    assert item.kind == "iframe_stream"
    assert item.resolution is None


def test_playlist_item_malformed_resolution():
    assert PlaylistItem.parse("RESOLUTION=wide").width == 0
    with pytest.raises(ValueError):
        PlaylistItem.parse("RESOLUTION=1280", strict=True)
