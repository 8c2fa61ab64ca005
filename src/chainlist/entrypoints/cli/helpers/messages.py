"""Terminal message helpers for the chainlist CLI.

Notices go to stderr so that stdout carries only list output. Emoji markers
fall back to ASCII on terminals that cannot encode them.
"""

import click

_GLYPHS = {
    "warn": ("⚠️", "[!]"),  # pragma: no mutate
    "error": ("❌", "[X]"),  # pragma: no mutate
}


def glyph(kind: str) -> str:
    """Return the emoji for ``kind``, or its ASCII fallback if stderr lacks it."""
    emoji, fallback = _GLYPHS[kind]
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except UnicodeEncodeError:
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr.

    Example:
        ``⚠️  at:7@9 ignored: index outside [1, 4]``
    """
    click.secho(f"{glyph('warn')}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  Cannot remove_from_front on an empty list.``
    """
    click.secho(f"{glyph('error')}  {msg}", fg="red", bold=True, err=True)
