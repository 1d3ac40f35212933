class LyricGapError(Exception):
    """Base exception for lyricgap."""


class FetchError(LyricGapError):
    """Raised when an HTTP request for remote audio fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class AudioError(LyricGapError):
    """Raised when an audio source cannot be turned into a data URI."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Audio error for {source}: {reason}")


class SelectionError(LyricGapError):
    """Raised when a preview selection names an unknown gap or option."""

    def __init__(self, word_id: str, value: str):
        self.word_id = word_id
        self.value = value
        super().__init__(f"Invalid selection {value!r} for {word_id}")


class InputError(LyricGapError):
    """Raised when a lyrics file cannot be read as text."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot read {source}: {reason}")
