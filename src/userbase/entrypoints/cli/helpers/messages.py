"""Terminal message helpers for the USERBASE CLI.

Each helper writes one styled line to stderr, prefixed with an emoji when the
stream can encode it and an ASCII marker otherwise. stdout stays reserved for
command results (JSON).
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded by the current stderr stream.

    The stream is looked up on every call since Click may swap it (tests,
    redirection).
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(pair: tuple[str, str]) -> str:
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """"⚠️" or "[!]"."""
    return _glyph(CAUTION)


def success_glyph() -> str:
    """"✅" or "[OK]"."""
    return _glyph(SUCCESS)


def error_glyph() -> str:
    """"❌" or "[X]"."""
    return _glyph(FAILURE)


def warn(msg: str) -> None:
    """Write a yellow, bold warning line to stderr."""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Write a green, bold success line to stderr."""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Write a red, bold error line to stderr."""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
