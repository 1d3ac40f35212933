"""Live terminal preview of a quiz.

Gaps are shown as ``[n: choice]`` where ``n`` is the gap's number in lyric
order, coloured green / red once checked or revealed.  All state lives in a
:class:`~lyricgap.scoring.Session`, so the preview behaves exactly like the
exported page.

    renderer = PreviewRenderer(parse(text))
    renderer.select("mot1", "mourir")
    renderer.check(player="Ana")
    click.echo(renderer.render())
"""

from datetime import datetime

import click

from . import scoring
from .models import ParsedLyrics, Segment, SegmentType, Word, paragraphs
from .scoring import RUNTIME_TEXT, Mark, Session

_COLOURS = {
    Mark.CORRECT: "green",
    Mark.INCORRECT: "red",
}


class PreviewRenderer:
    """Render a parsed quiz to styled terminal text and track its session."""

    def __init__(self, model: ParsedLyrics):
        self.load(model)

    def load(self, model: ParsedLyrics) -> None:
        """Show *model* from a fresh session; earlier selections are dropped."""
        self.model = model
        self.session: Session = scoring.new_session(model)
        self._numbers = {word.id: n for n, word in enumerate(model.words, start=1)}

    # --- Actions ---

    def select(self, word_id: str, value: str) -> None:
        self.session = scoring.select(self.session, word_id, value)

    def check(self, player: str = "", when: datetime | None = None) -> None:
        self.session = scoring.check(self.session, player=player, when=when)

    def reveal(self) -> None:
        self.session = scoring.reveal(self.session)

    # --- Lookup ---

    def word_at(self, number: int) -> Word | None:
        """Return the word shown as gap *number*, or None."""
        if 1 <= number <= len(self.model.words):
            return self.model.words[number - 1]
        return None

    # --- Rendering ---

    def render(self) -> str:
        lines = ["".join(self._render_segment(seg) for seg in p) for p in paragraphs(self.model)]
        if self.session.message:
            lines.append("")
            tone = self.session.tone
            lines.append(click.style(self.session.message, fg=_COLOURS[tone] if tone else None, bold=True))
        return "\n".join(lines)

    def _render_segment(self, seg: Segment) -> str:
        if seg.type is not SegmentType.GAP:
            return seg.content
        value = self.session.selection(seg.word_id) or RUNTIME_TEXT["placeholder"]
        label = f"[{self._numbers[seg.word_id]}: {value}]"
        mark = self.session.mark(seg.word_id)
        return click.style(label, fg=_COLOURS[mark]) if mark else label
