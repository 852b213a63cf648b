from m3u8reader import Playlist, PlaylistItem, SegmentItem


def test_is_master_from_items():
    assert Playlist().is_master is False
    assert Playlist(items=[PlaylistItem(uri="a.m3u8")]).is_master is True
    assert (
        Playlist(items=[PlaylistItem(uri="a.m3u8"), SegmentItem(duration=1.0)]).is_master
        is True
    )


def test_explicit_master_flag_wins():
    assert Playlist(master=True).is_master is True
    assert Playlist(master=False, items=[PlaylistItem()]).is_master is False


def test_segments_playlists_and_duration():
    playlist = Playlist(
        items=[
            SegmentItem(duration=1.5),
            PlaylistItem(bandwidth=1),
            SegmentItem(duration=2.5),
        ]
    )
    assert [segment.duration for segment in playlist.segments] == [1.5, 2.5]
    assert [stream.bandwidth for stream in playlist.playlists] == [1]
    assert playlist.duration == 4.0
