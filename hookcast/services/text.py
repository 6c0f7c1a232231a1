"""Presentation helpers for IRC-formatted notification lines."""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol

logger = logging.getLogger(__name__)

BOLD = "\x02"
COLOR = "\x03"
UNDERLINE = "\x1f"
RESET = "\x0f"

PRETTIFY_LIMIT = 100
ELLIPSIS = "..."

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
_FORMATTING = re.compile(r"\x03(?:\d{1,2}(?:,\d{1,2})?)?|[\x02\x0f\x16\x1d\x1e\x1f]")


class UrlShortener(Protocol):
    def shorten(self, url: str) -> str: ...


def sanitize(value: Any) -> str:
    """Render ``value`` as text with every control character removed."""
    if value is None:
        return ""
    return _CONTROL_CHARS.sub("", str(value))


def strip_formatting(text: str) -> str:
    """Remove IRC formatting codes, leaving the displayed text."""
    return _FORMATTING.sub("", text or "")


def _styled(style: str, value: Any) -> str:
    text = sanitize(value) if value else ""
    if not text:
        return ""
    return f"{style}{text}{RESET}"


def format_repository(name: Any) -> str:
    return _styled(f"{COLOR}13", name)


def format_user(name: Any) -> str:
    return _styled(f"{COLOR}15", name)


def format_branch(name: Any) -> str:
    return _styled(f"{COLOR}06", name)


def format_hash(sha: Any) -> str:
    """Render a commit hash; callers pass it already shortened."""
    return _styled(f"{COLOR}14", sha)


def format_dangerous(word: Any) -> str:
    return _styled(f"{BOLD}{COLOR}04", word)


def format_url(url: Any) -> str:
    return _styled(f"{COLOR}02{UNDERLINE}", url)


def format_number(n: int, singular: str, plural: str) -> str:
    """
    Render a count with an English noun.

    Example
    -------
    ``format_number(1, "new commit", "new commits")`` → ``'1 new commit'``
    """
    return f"{n} {singular if n == 1 else plural}"


def split_lines(text: str) -> list[str]:
    """
    Split ``text`` on newlines, ignoring one trailing terminator.

    ``"a\\n"`` is one line; ``"a\\n\\n"`` is two, the second empty.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def prettify(content: Any) -> str:
    """Collapse a comment or message body to a single bounded display line."""
    text = str(content or "").strip()
    if not text:
        return ""
    lines = split_lines(text)
    first = sanitize(lines[0]).strip()
    if len(first) > PRETTIFY_LIMIT or len(lines) > 1:
        first = first[:PRETTIFY_LIMIT].rstrip() + ELLIPSIS
    return first


def shorten_url(url: str, shortener: UrlShortener | None = None) -> str:
    """
    Shorten ``url`` through ``shortener``.

    Any failure of the shortener falls back to the original URL.
    """
    if not url or shortener is None:
        return url
    try:
        short = shortener.shorten(url)
    except Exception as exc:  # noqa: BLE001
        logger.warning("URL shortening failed for %s: %s", url, exc)
        return url
    if not isinstance(short, str) or not short:
        return url
    return short
