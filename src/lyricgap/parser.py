"""Lyrics parser: raw text with marked words → :class:`~lyricgap.models.ParsedLyrics`.

Marker convention
-----------------

A whitespace-delimited token whose *last* character is :data:`MARKER` is a
hidden word.  The marker is stripped to obtain the answer; a token wrapped in
markers on both sides (``*mourir*``) loses the leading one too.  Nothing else
is stripped, so ``nuit,*`` hides ``nuit,`` with its comma.

    >>> model = parse("Je l'aime à *mourir*")
    >>> [s.type.value for s in model.segments]
    ['text', 'gap']
    >>> model.words[0].answer
    'mourir'

Parsing never fails: text without markers yields text segments only, and an
empty string yields an empty model.
"""

import logging
import random
import re

from .models import ParsedLyrics, Segment, SegmentType, Word

log = logging.getLogger(__name__)

MARKER = "*"
ID_PREFIX = "mot"
MAX_DISTRACTORS = 2

# Line boundaries; "\r\n" counts as one.
_LINE_BREAK_RE = re.compile(r"\r?\n")

# A whole token ending in the marker.  The lookahead keeps "foo*bar" intact:
# the marker only counts when it is the token's final character.
_GAP_TOKEN_RE = re.compile(rf"(\S+{re.escape(MARKER)})(?!\S)")


def parse(raw_text: str, rng: random.Random | None = None) -> ParsedLyrics:
    """Parse *raw_text* into segments and words.

    Args:
        raw_text: Lyrics, one line per lyric line, hidden words marked.
        rng:      Random source for distractor draws and option order.
                  Defaults to a fresh, OS-seeded :class:`random.Random`.

    Returns:
        A new :class:`ParsedLyrics`; nothing is shared with earlier calls.
    """
    rng = rng or random.Random()
    segments = _segment(raw_text)
    words = _build_words(segments, rng)
    log.debug("Parsed %d segments, %d words", len(segments), len(words))
    return ParsedLyrics(segments=tuple(segments), words=tuple(words))


# ---------------------------------------------------------------------------
# Tokenisation
# ---------------------------------------------------------------------------


def _segment(raw_text: str) -> list[Segment]:
    segments: list[Segment] = []
    ordinal = 0
    lines = _LINE_BREAK_RE.split(raw_text)

    for index, line in enumerate(lines):
        # re.split with a capture group alternates text, gap, text, gap, ...
        for position, token in enumerate(_GAP_TOKEN_RE.split(line)):
            if not token:
                continue
            if position % 2:
                ordinal += 1
                segments.append(Segment.gap(f"{ID_PREFIX}{ordinal}", hidden_word(token)))
            else:
                segments.append(Segment.text(token))

        if index < len(lines) - 1:
            segments.append(Segment.newline())

    return segments


def hidden_word(token: str) -> str:
    """Return the answer hidden by a marked *token*.

    >>> hidden_word("mourir*"), hidden_word("*mourir*"), hidden_word("nuit,*")
    ('mourir', 'mourir', 'nuit,')
    """
    word = token[: -len(MARKER)]
    if word.startswith(MARKER) and len(word) > len(MARKER):
        word = word[len(MARKER):]
    return word


# ---------------------------------------------------------------------------
# Words and distractors
# ---------------------------------------------------------------------------


def _build_words(segments: list[Segment], rng: random.Random) -> list[Word]:
    gaps = [s for s in segments if s.type is SegmentType.GAP]
    # Distinct hidden words in order of first appearance
    distinct = list(dict.fromkeys(s.answer for s in gaps))

    words: list[Word] = []
    for seg in gaps:
        pool = [w for w in distinct if w != seg.answer]
        distractors = rng.sample(pool, min(MAX_DISTRACTORS, len(pool)))
        options = [seg.answer, *distractors]
        rng.shuffle(options)  # Fisher-Yates, uniform over permutations
        words.append(Word(id=seg.word_id, answer=seg.answer, options=tuple(options)))
    return words
