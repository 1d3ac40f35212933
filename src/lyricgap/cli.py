import logging
import re
import sys
from pathlib import Path

import click

from .audio import encode_audio
from .exceptions import FetchError, InputError, LyricGapError
from .generator import generate
from .parser import MARKER, parse
from .preview import PreviewRenderer

DEFAULT_TITLE = "Titre de la chanson"


def _safe_filename(title: str) -> str:
    """Derive the download filename: non-alphanumerics → ``_``, lowercased."""
    stem = re.sub(r"[^a-z0-9]", "_", title, flags=re.IGNORECASE).lower()
    if not re.search(r"[a-z0-9]", stem):
        stem = "quiz"
    return f"{stem}_game.html"


def _title_from_file(name: str) -> str:
    """Derive a title from the lyrics filename as a fallback."""
    if name in ("-", "<stdin>"):
        return DEFAULT_TITLE
    return Path(name).stem.replace("-", " ").replace("_", " ").strip().title() or DEFAULT_TITLE


def _read_lyrics(lyrics) -> str:
    """Read the lyrics stream, failing the command on undecodable bytes."""
    try:
        return lyrics.read()
    except UnicodeDecodeError as exc:
        _fail(InputError(lyrics.name, f"not valid UTF-8 (byte {exc.start})"))


def _fail(exc: LyricGapError) -> None:
    msg = f"Error: {exc}"
    if isinstance(exc, FetchError) and exc.status_code == 0:
        msg = f"Error: Could not reach {exc.url}"
    click.echo(msg, err=True)
    sys.exit(1)


@click.group(context_settings={"auto_envvar_prefix": "LYRICGAP"})
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def main(verbose: bool) -> None:
    """Turn lyrics with hidden words into a fill-in-the-blank quiz.

    Mark a word to hide by ending it with an asterisk: "Je l'aime à mourir*".
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("lyrics", type=click.File("r", encoding="utf-8"))
@click.option("-t", "--title", default=None, help="Song title (default: from the lyrics filename).")
@click.option("-a", "--audio", default=None, metavar="PATH_OR_URL",
              help="Audio file or http(s) URL to embed in the page.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <title>_game.html)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
def build(lyrics, title: str | None, audio: str | None, output_path: str | None, stdout: bool) -> None:
    """Export LYRICS as a standalone HTML quiz page.

    LYRICS is a text file, or - for standard input.
    """
    title = title or _title_from_file(lyrics.name)
    model = parse(_read_lyrics(lyrics))
    if not model.words:
        click.echo(f"Warning: no hidden words (end a word with {MARKER!r} to hide it)", err=True)

    # --- Audio ---
    audio_uri = None
    if audio:
        try:
            audio_uri = encode_audio(audio)
        except LyricGapError as exc:
            _fail(exc)

    # --- Render ---
    page = generate(title, model, audio_uri)

    # --- Output ---
    if stdout:
        click.echo(page, nl=False)
        return

    dest = Path(output_path) if output_path else Path(_safe_filename(title))
    dest.write_text(page, encoding="utf-8")
    click.echo(f"Written to {dest} ({len(model.words)} hidden words)")


@main.command()
@click.argument("lyrics", type=click.File("r", encoding="utf-8"))
@click.option("-p", "--player", default="", help="Player name shown in the summary.")
def preview(lyrics, player: str) -> None:
    """Play the quiz for LYRICS in the terminal.

    \b
    Commands at the prompt:
      <n>  choose an option for gap n
      c    check the answers
      r    reveal the answers
      q    quit
    """
    renderer = PreviewRenderer(parse(_read_lyrics(lyrics)))

    while True:
        click.echo(renderer.render())
        click.echo()
        command = click.prompt("Gap number, c(heck), r(eveal) or q(uit)").strip().lower()

        if command == "q":
            return
        if command == "c":
            renderer.check(player=player)
            if renderer.session.summary:
                click.echo(renderer.session.summary.as_text())
            continue
        if command == "r":
            renderer.reveal()
            continue

        word = renderer.word_at(int(command)) if command.isdecimal() else None
        if word is None:
            click.echo(f"Unknown command: {command}", err=True)
            continue

        for number, option in enumerate(word.options, start=1):
            click.echo(f"  {number}) {option}")
        choice = click.prompt("Option", type=click.IntRange(1, len(word.options)))
        renderer.select(word.id, word.options[choice - 1])
