"""Render a :class:`~lyricgap.models.ParsedLyrics` to a self-contained quiz page.

The page needs no supporting files and no network: styles, the quiz data and
the runtime (:mod:`lyricgap.assets`) are all inline, and audio travels as a
``data:`` URI.

Escaping contexts
-----------------

+---------------------------+-------------------------------+--------------------------------+
| Context                   | Content                       | Escaper                        |
+===========================+===============================+================================+
| HTML body text            | title, lyric text             | :func:`escape_text`            |
+---------------------------+-------------------------------+--------------------------------+
| HTML attribute value      | gap ids, audio URI and type   | :func:`escape_attr`            |
+---------------------------+-------------------------------+--------------------------------+
| JSON inside ``<script>``  | answers, options, UI strings  | :func:`escape_json_for_script` |
+---------------------------+-------------------------------+--------------------------------+

The static layout carries no answer or option: each gap is an empty
``<select>`` whose id is the word id, and the runtime fills it from the JSON.

Usage::

    from lyricgap.generator import generate
    from lyricgap.parser import parse
    page = generate("Je l'aime à mourir", parse(lyrics), audio_data_uri)
    Path("quiz.html").write_text(page, encoding="utf-8")
"""

import html
import json
import logging
import re

from .assets import RUNTIME_JS, STYLE_CSS
from .models import ParsedLyrics, Segment, SegmentType, paragraphs
from .scoring import RUNTIME_TEXT

log = logging.getLogger(__name__)

# Static page wording (single locale, like RUNTIME_TEXT).
_WELCOME = "Bienvenue !"
_INSTRUCTIONS = "Écoutez la chanson et complétez les paroles."
_NAME_PROMPT = "Votre nom :"
_START = "Commencer le jeu"
_NO_AUDIO_SUPPORT = "Votre navigateur ne supporte pas l'élément audio."

# "data:audio/mpeg;base64,..." → "audio/mpeg"
_DATA_URI_TYPE_RE = re.compile(r"^data:([\w.+-]+/[\w.+-]+)[;,]")

# Characters that could end or confuse a <script> block, as JSON escapes.
_SCRIPT_ESCAPES = str.maketrans({
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


def escape_text(value: str) -> str:
    """Escape *value* for HTML element content."""
    return html.escape(value, quote=False)


def escape_attr(value: str) -> str:
    """Escape *value* for a double- or single-quoted HTML attribute."""
    return html.escape(value, quote=True)


def escape_json_for_script(data) -> str:
    """Serialize *data* as JSON that is safe inside a ``<script>`` element.

    HTML entities are not decoded inside ``<script>``, so markup characters
    are written as ``\\uXXXX`` escapes, which ``JSON.parse`` turns back into
    the original characters.
    """
    return json.dumps(data, ensure_ascii=False).translate(_SCRIPT_ESCAPES)


class ArtifactGenerator:
    """Render a parsed quiz to a standalone HTML document."""

    def render(self, title: str, model: ParsedLyrics, audio: str | None = None) -> str:
        """Return the HTML page for *model*.

        *audio* is an optional ``data:`` URI.  Without it the player is kept
        but has no source.  The model is only read.
        """
        payload = {
            "words": [word.to_payload() for word in model.words],
            "text": RUNTIME_TEXT,
        }
        title_text = escape_text(title)

        parts: list[str] = [
            "<!DOCTYPE html>",
            '<html lang="fr">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{title_text}</title>",
            f"<style>{STYLE_CSS}</style>",
            "</head>",
            "<body>",
            # --- Intro dialog ---
            '<div id="intro-overlay" class="intro-overlay"></div>',
            '<div id="intro" class="intro-popup">',
            f"<h2>{escape_text(_WELCOME)}</h2>",
            f"<p>{escape_text(_INSTRUCTIONS)}</p>",
            f'<label for="player-name">{escape_text(_NAME_PROMPT)}</label>',
            f'<input type="text" id="player-name" placeholder="{escape_attr(RUNTIME_TEXT["anonymous"])}">',
            f'<button type="button" id="start-button" class="button">{escape_text(_START)}</button>',
            "</div>",
            # --- Game ---
            '<div id="game" class="container" hidden>',
            f"<h1>{title_text}</h1>",
            *_render_audio(audio),
            *_render_lyrics(model),
            '<div class="buttons">',
            f'<button type="button" id="check-button" class="button">{escape_text(RUNTIME_TEXT["check"])}</button>',
            f'<button type="button" id="reveal-button" class="button">{escape_text(RUNTIME_TEXT["reveal"])}</button>',
            "</div>",
            '<div id="result" class="result"></div>',
            "</div>",
            # --- Data + runtime ---
            f'<script type="application/json" id="quiz-data">{escape_json_for_script(payload)}</script>',
            f"<script>{RUNTIME_JS}</script>",
            "</body>",
            "</html>",
        ]

        document = "\n".join(parts) + "\n"
        log.debug(
            "Generated artifact: %d controls, %d bytes, audio=%s",
            len(model.words),
            len(document),
            bool(audio),
        )
        return document


def generate(title: str, model: ParsedLyrics, audio: str | None = None) -> str:
    """Shortcut for ``ArtifactGenerator().render(title, model, audio)``."""
    return ArtifactGenerator().render(title, model, audio)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _render_audio(audio: str | None) -> list[str]:
    if audio:
        m = _DATA_URI_TYPE_RE.match(audio)
        type_attr = f' type="{escape_attr(m.group(1))}"' if m else ""
        source = f'<source src="{escape_attr(audio)}"{type_attr}>'
    else:
        source = "<!-- no audio -->"
    return [
        '<div class="audio-player">',
        "<audio controls>",
        source,
        escape_text(_NO_AUDIO_SUPPORT),
        "</audio>",
        "</div>",
    ]


def _render_lyrics(model: ParsedLyrics) -> list[str]:
    lines = ['<div class="lyrics">']
    for paragraph in paragraphs(model):
        lines.append("<p>" + "".join(_render_segment(seg) for seg in paragraph) + "</p>")
    lines.append("</div>")
    return lines


def _render_segment(seg: Segment) -> str:
    if seg.type is SegmentType.GAP:
        word_id = escape_attr(seg.word_id or "")
        return f'<select id="{word_id}" class="dropdown" aria-label="{word_id}"></select>'
    return escape_text(seg.content)
