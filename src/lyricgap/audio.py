"""Turn an audio file or URL into a ``data:`` URI the quiz page can embed."""

import base64
import logging
import mimetypes
from pathlib import Path

import httpx

from .exceptions import AudioError, FetchError

log = logging.getLogger(__name__)


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def to_data_uri(data: bytes, mime_type: str) -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def fetch(url: str) -> tuple[bytes, str | None]:
    """Download *url* and return ``(body, content type)``.

    Raises FetchError on transport errors (status 0) and non-200 replies.
    """
    try:
        resp = httpx.get(url, follow_redirects=True, timeout=30)
    except httpx.RequestError as exc:
        raise FetchError(url, 0) from exc
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    content_type = resp.headers.get("content-type", "").split(";")[0].strip()
    return resp.content, content_type or None


def encode_audio(source: str) -> str:
    """Return a ``data:`` URI for the audio at *source* (path or http(s) URL).

    When fetching, an ``audio/*`` ``Content-Type`` wins; a missing or generic
    one (``application/octet-stream``) falls back to the URL's extension.
    Files are typed by extension.

    Raises AudioError when the file is unreadable or not audio, and
    FetchError when a download fails.
    """
    if is_url(source):
        data, mime_type = fetch(source)
        if not (mime_type or "").startswith("audio/"):
            mime_type = mimetypes.guess_type(source.split("?")[0])[0] or mime_type
    else:
        path = Path(source)
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise AudioError(source, exc.strerror or "unreadable") from exc
        mime_type = mimetypes.guess_type(path.name)[0]

    if not mime_type or not mime_type.startswith("audio/"):
        raise AudioError(source, f"not an audio type ({mime_type or 'unknown'})")

    log.debug("Encoded %d bytes of %s from %s", len(data), mime_type, source)
    return to_data_uri(data, mime_type)
