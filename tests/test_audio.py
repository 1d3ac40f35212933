import base64
from unittest.mock import MagicMock, patch

import httpx
import pytest

from lyricgap.audio import encode_audio, is_url, to_data_uri
from lyricgap.exceptions import AudioError, FetchError

SOUND = b"ID3\x04\x00fake-mp3"


def _response(status_code=200, content=SOUND, content_type="audio/mpeg") -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = content
    resp.headers = {"content-type": content_type}
    return resp


def test_to_data_uri():
    assert to_data_uri(b"abc", "audio/mpeg") == "data:audio/mpeg;base64,YWJj"


def test_is_url():
    assert is_url("https://example.com/song.mp3")
    assert is_url("http://example.com/song.mp3")
    assert not is_url("song.mp3")


# ---------------------------------------------------------------------------
# Local files
# ---------------------------------------------------------------------------


def test_encode_local_mp3(tmp_path):
    path = tmp_path / "song.mp3"
    path.write_bytes(SOUND)
    uri = encode_audio(str(path))
    assert uri.startswith("data:audio/mpeg;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == SOUND


def test_missing_file_raises_audio_error(tmp_path):
    with pytest.raises(AudioError):
        encode_audio(str(tmp_path / "absent.mp3"))


def test_non_audio_file_rejected(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("not a song")
    with pytest.raises(AudioError, match="not an audio type"):
        encode_audio(str(path))


# ---------------------------------------------------------------------------
# URLs
# ---------------------------------------------------------------------------


def test_encode_url_uses_content_type():
    with patch("lyricgap.audio.httpx.get", return_value=_response(content_type="audio/ogg; codecs=vorbis")):
        uri = encode_audio("https://example.com/stream")
    assert uri.startswith("data:audio/ogg;base64,")


def test_encode_url_falls_back_to_extension():
    with patch("lyricgap.audio.httpx.get", return_value=_response(content_type="")):
        uri = encode_audio("https://example.com/song.mp3?dl=1")
    assert uri.startswith("data:audio/mpeg;base64,")


def test_generic_content_type_falls_back_to_extension():
    with patch("lyricgap.audio.httpx.get", return_value=_response(content_type="application/octet-stream")):
        uri = encode_audio("https://example.com/song.mp3")
    assert uri.startswith("data:audio/mpeg;base64,")


def test_generic_content_type_without_extension_rejected():
    with patch("lyricgap.audio.httpx.get", return_value=_response(content_type="application/octet-stream")):
        with pytest.raises(AudioError, match="application/octet-stream"):
            encode_audio("https://example.com/stream")


def test_http_error_raises_fetch_error():
    with patch("lyricgap.audio.httpx.get", return_value=_response(status_code=404)):
        with pytest.raises(FetchError) as info:
            encode_audio("https://example.com/song.mp3")
    assert info.value.status_code == 404


def test_transport_error_raises_fetch_error_zero():
    error = httpx.ConnectError("refused")
    with patch("lyricgap.audio.httpx.get", side_effect=error):
        with pytest.raises(FetchError) as info:
            encode_audio("https://example.com/song.mp3")
    assert info.value.status_code == 0


def test_html_reply_rejected():
    with patch("lyricgap.audio.httpx.get", return_value=_response(content_type="text/html")):
        with pytest.raises(AudioError):
            encode_audio("https://example.com/song")
