"""Check / reveal engine shared by every way of playing a quiz.

The terminal preview drives these functions directly.  The exported artifact
embeds a JavaScript runtime (:mod:`lyricgap.assets`) that performs the same
transitions on its ``<select>`` controls and prints the same
:data:`RUNTIME_TEXT` strings, which the generator serializes into the page.

State machine::

    unanswered --check--> checked --reveal--> revealed
         \\______________reveal______________/
    (check and reveal are accepted from any state)

A :class:`Session` is a value: every transition returns a new one, and a new
model always starts from :func:`new_session`, so no selection survives a
change of lyrics.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from .exceptions import SelectionError
from .models import ParsedLyrics, Word

log = logging.getLogger(__name__)

# UI strings, single locale.  Keys are shared with the embedded runtime.
RUNTIME_TEXT = {
    "locale": "fr-FR",
    "placeholder": "---",
    "check": "Vérifier mes réponses",
    "reveal": "Afficher les réponses",
    "score": "Vous avez {correct} sur {total} réponses correctes !",
    "incomplete": "Veuillez remplir toutes les options avant de vérifier.",
    "revealed": "Les réponses ont été affichées.",
    "anonymous": "Anonyme",
    "summary_title": "Résumé du jeu",
    "name": "Nom",
    "date": "Date",
    "correct": "Bonnes réponses",
    "errors": "Erreurs",
    "copy": "Copier le résumé",
    "copied": "Résumé copié !",
    "close": "Fermer",
}


class GameState(Enum):
    UNANSWERED = "unanswered"
    CHECKED = "checked"
    REVEALED = "revealed"


class Mark(Enum):
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class Score:
    correct: int
    total: int

    @property
    def errors(self) -> int:
        return self.total - self.correct


@dataclass(frozen=True)
class Summary:
    """Completion summary shown after a fully answered check."""

    player: str
    date: str
    score: Score

    def lines(self) -> list[str]:
        return [
            f"{RUNTIME_TEXT['name']} : {self.player}",
            f"{RUNTIME_TEXT['date']} : {self.date}",
            f"{RUNTIME_TEXT['correct']} : {self.score.correct}",
            f"{RUNTIME_TEXT['errors']} : {self.score.errors}",
        ]

    def as_text(self) -> str:
        return "\n".join([f"{RUNTIME_TEXT['summary_title']} :", *self.lines()])


@dataclass(frozen=True)
class Session:
    """Per-render quiz state, keyed by word id.

    ``selections`` maps word id → chosen option (absent means the placeholder
    is still selected); ``marks`` maps word id → the mark set by the last
    check or reveal.
    """

    words: tuple[Word, ...] = ()
    state: GameState = GameState.UNANSWERED
    selections: dict[str, str] = field(default_factory=dict)
    marks: dict[str, Mark] = field(default_factory=dict)
    message: str = ""
    score: Score | None = None
    summary: Summary | None = None

    def selection(self, word_id: str) -> str:
        return self.selections.get(word_id, "")

    def mark(self, word_id: str) -> Mark | None:
        return self.marks.get(word_id)

    @property
    def complete(self) -> bool:
        """True when no control still shows the placeholder."""
        return all(self.selection(w.id) for w in self.words)

    @property
    def tone(self) -> Mark | None:
        """Colour of the result message: None for a score or no message."""
        if self.state is GameState.REVEALED:
            return Mark.CORRECT
        if self.state is GameState.CHECKED and self.score is None:
            return Mark.INCORRECT
        return None


def new_session(model: ParsedLyrics) -> Session:
    return Session(words=model.words)


def format_score(score: Score) -> str:
    return RUNTIME_TEXT["score"].format(correct=score.correct, total=score.total)


def format_date(when: datetime) -> str:
    """Short ``fr-FR`` date, as ``toLocaleDateString('fr-FR')`` prints it."""
    return when.strftime("%d/%m/%Y")


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------


def select(session: Session, word_id: str, value: str) -> Session:
    """Record *value* for *word_id*.

    Only this control's mark is cleared; the state, the message and every
    other mark stay as the last check or reveal left them.  An empty *value*
    puts the placeholder back.

    Raises SelectionError for an unknown id or a value outside the options.
    """
    word = next((w for w in session.words if w.id == word_id), None)
    if word is None or (value and value not in word.options):
        raise SelectionError(word_id, value)

    selections = {k: v for k, v in session.selections.items() if k != word_id}
    if value:
        selections[word_id] = value
    marks = {k: v for k, v in session.marks.items() if k != word_id}
    return replace(session, selections=selections, marks=marks)


def check(session: Session, player: str = "", when: datetime | None = None) -> Session:
    """Mark every control and score the quiz if every control is answered.

    An unanswered control is marked incorrect.  When any control is still
    unanswered the message asks for completion and no score is produced.
    """
    marks = {
        w.id: Mark.CORRECT if session.selection(w.id) == w.answer else Mark.INCORRECT
        for w in session.words
    }

    if not session.complete:
        return replace(
            session,
            state=GameState.CHECKED,
            marks=marks,
            message=RUNTIME_TEXT["incomplete"],
            score=None,
            summary=None,
        )

    score = Score(
        correct=sum(1 for m in marks.values() if m is Mark.CORRECT),
        total=len(session.words),
    )
    summary = Summary(
        player=player.strip() or RUNTIME_TEXT["anonymous"],
        date=format_date(when or datetime.now()),
        score=score,
    )
    log.debug("Checked %d/%d", score.correct, score.total)
    return replace(
        session,
        state=GameState.CHECKED,
        marks=marks,
        message=format_score(score),
        score=score,
        summary=summary,
    )


def reveal(session: Session) -> Session:
    """Select the correct answer everywhere and mark all controls correct."""
    return replace(
        session,
        state=GameState.REVEALED,
        selections={w.id: w.answer for w in session.words},
        marks={w.id: Mark.CORRECT for w in session.words},
        message=RUNTIME_TEXT["revealed"],
        score=None,
        summary=None,
    )
