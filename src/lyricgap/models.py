from dataclasses import dataclass, field
from enum import Enum


class SegmentType(Enum):
    TEXT = "text"
    GAP = "gap"
    NEWLINE = "newline"


@dataclass(frozen=True)
class Segment:
    """One ordered piece of parsed lyrics.

    ``content`` is set for TEXT segments, ``word_id`` and ``answer`` for GAP
    segments.  NEWLINE segments carry nothing.
    """

    type: SegmentType
    content: str = ""
    word_id: str | None = None
    answer: str | None = None  # parser-internal, never rendered into markup

    @classmethod
    def text(cls, content: str) -> "Segment":
        return cls(SegmentType.TEXT, content=content)

    @classmethod
    def gap(cls, word_id: str, answer: str) -> "Segment":
        return cls(SegmentType.GAP, word_id=word_id, answer=answer)

    @classmethod
    def newline(cls) -> "Segment":
        return cls(SegmentType.NEWLINE)


@dataclass(frozen=True)
class Word:
    """A single fill-in-the-blank question."""

    id: str
    answer: str
    options: tuple[str, ...] = ()  # answer + 0-2 distractors, shuffled

    def to_payload(self) -> dict:
        return {"id": self.id, "answer": self.answer, "options": list(self.options)}


@dataclass(frozen=True)
class ParsedLyrics:
    """Segments in lyric order plus one Word per gap."""

    segments: tuple[Segment, ...] = ()
    words: tuple[Word, ...] = ()
    _index: dict = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", {w.id: w for w in self.words})

    def word(self, word_id: str) -> Word | None:
        return self._index.get(word_id)

    @property
    def word_ids(self) -> list[str]:
        return [w.id for w in self.words]

    def to_text(self) -> str:
        """Rebuild the lyrics with every gap replaced by its answer."""
        parts: list[str] = []
        for seg in self.segments:
            if seg.type is SegmentType.NEWLINE:
                parts.append("\n")
            elif seg.type is SegmentType.GAP:
                parts.append(seg.answer or "")
            else:
                parts.append(seg.content)
        return "".join(parts)


def paragraphs(model: ParsedLyrics) -> list[list[Segment]]:
    """Group segments into paragraphs, one per line.

    NEWLINE segments are the separators and never appear in the result.
    Paragraphs with no gap and only whitespace text are dropped, so blank
    lines never produce empty wrappers.
    """
    result: list[list[Segment]] = []
    current: list[Segment] = []

    for seg in (*model.segments, Segment.newline()):
        if seg.type is not SegmentType.NEWLINE:
            current.append(seg)
            continue
        if any(s.type is SegmentType.GAP or s.content.strip() for s in current):
            result.append(current)
        current = []

    return result
