from datetime import datetime

import pytest

from lyricgap.exceptions import SelectionError
from lyricgap.models import ParsedLyrics, Word
from lyricgap.scoring import (
    RUNTIME_TEXT,
    GameState,
    Mark,
    Score,
    Summary,
    check,
    format_date,
    new_session,
    reveal,
    select,
)

WHEN = datetime(2024, 3, 9, 18, 30)


def _model() -> ParsedLyrics:
    return ParsedLyrics(
        words=(
            Word(id="mot1", answer="rien", options=("nuits", "rien", "mourir")),
            Word(id="mot2", answer="nuits", options=("rien", "mourir", "nuits")),
            Word(id="mot3", answer="mourir", options=("mourir", "nuits", "rien")),
        )
    )


def _answered(*values: str):
    session = new_session(_model())
    for word_id, value in zip(("mot1", "mot2", "mot3"), values):
        session = select(session, word_id, value)
    return session


# ---------------------------------------------------------------------------
# new_session / select
# ---------------------------------------------------------------------------


def test_new_session_is_unanswered():
    session = new_session(_model())
    assert session.state is GameState.UNANSWERED
    assert session.selections == {}
    assert session.marks == {}
    assert session.message == ""
    assert not session.complete


def test_select_records_value_without_mutating():
    before = new_session(_model())
    after = select(before, "mot1", "rien")
    assert after.selection("mot1") == "rien"
    assert before.selection("mot1") == ""


def test_select_unknown_word_raises():
    with pytest.raises(SelectionError):
        select(new_session(_model()), "mot9", "rien")


def test_select_value_outside_options_raises():
    with pytest.raises(SelectionError):
        select(new_session(_model()), "mot1", "soleil")


def test_select_empty_value_restores_placeholder():
    session = select(_answered("rien"), "mot1", "")
    assert session.selection("mot1") == ""
    assert "mot1" not in session.selections


def test_select_after_check_clears_only_that_mark():
    checked = check(_answered("nuits", "nuits", "rien"), when=WHEN)
    changed = select(checked, "mot1", "rien")
    assert changed.mark("mot1") is None
    assert changed.mark("mot2") is Mark.CORRECT
    assert changed.mark("mot3") is Mark.INCORRECT
    assert changed.state is GameState.CHECKED
    assert changed.message == checked.message


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


def test_check_incomplete_marks_all_and_prompts():
    session = check(_answered("rien"), when=WHEN)
    assert session.state is GameState.CHECKED
    assert session.mark("mot1") is Mark.CORRECT
    assert session.mark("mot2") is Mark.INCORRECT
    assert session.mark("mot3") is Mark.INCORRECT
    assert session.message == RUNTIME_TEXT["incomplete"]
    assert session.score is None
    assert session.summary is None
    assert session.tone is Mark.INCORRECT


def test_check_complete_scores_and_summarises():
    session = check(_answered("rien", "mourir", "mourir"), player="  Ana ", when=WHEN)
    assert session.score == Score(correct=2, total=3)
    assert session.message == "Vous avez 2 sur 3 réponses correctes !"
    assert session.summary == Summary(player="Ana", date="09/03/2024", score=Score(2, 3))
    assert session.mark("mot2") is Mark.INCORRECT
    assert session.tone is None


def test_check_anonymous_player():
    session = check(_answered("rien", "nuits", "mourir"), when=WHEN)
    assert session.summary.player == "Anonyme"


def test_check_on_empty_model_is_always_complete():
    session = check(new_session(ParsedLyrics()), when=WHEN)
    assert session.score == Score(correct=0, total=0)
    assert session.message == "Vous avez 0 sur 0 réponses correctes !"
    assert session.summary is not None


def test_check_again_after_change_updates_score():
    session = check(_answered("nuits", "nuits", "mourir"), when=WHEN)
    session = check(select(session, "mot1", "rien"), when=WHEN)
    assert session.score == Score(correct=3, total=3)


# ---------------------------------------------------------------------------
# reveal
# ---------------------------------------------------------------------------


def test_reveal_without_answers():
    session = reveal(new_session(_model()))
    assert session.state is GameState.REVEALED
    assert session.selections == {"mot1": "rien", "mot2": "nuits", "mot3": "mourir"}
    assert all(session.mark(w) is Mark.CORRECT for w in ("mot1", "mot2", "mot3"))
    assert session.message == RUNTIME_TEXT["revealed"]
    assert session.tone is Mark.CORRECT


def test_reveal_after_check_drops_summary():
    session = reveal(check(_answered("rien", "nuits", "nuits"), when=WHEN))
    assert session.summary is None
    assert session.score is None


def test_check_after_reveal_scores_full_marks():
    session = check(reveal(new_session(_model())), when=WHEN)
    assert session.state is GameState.CHECKED
    assert session.score == Score(correct=3, total=3)


# ---------------------------------------------------------------------------
# Summary formatting
# ---------------------------------------------------------------------------


def test_format_date_matches_fr_locale():
    assert format_date(datetime(2025, 12, 1)) == "01/12/2025"


def test_summary_text():
    summary = Summary(player="Ana", date="09/03/2024", score=Score(correct=2, total=3))
    assert summary.as_text() == (
        "Résumé du jeu :\n"
        "Nom : Ana\n"
        "Date : 09/03/2024\n"
        "Bonnes réponses : 2\n"
        "Erreurs : 1"
    )
