"""Shared behavior for event formatters."""

from __future__ import annotations

import re
from typing import Any, Mapping

from hookcast.services.payload import Payload
from hookcast.services.text import UrlShortener, format_url, shorten_url

_REF_PREFIX = re.compile(r"\Arefs/(heads|tags)/")


def ref_name(ref: str) -> str:
    """Strip ``refs/heads/`` or ``refs/tags/`` from a git ref."""
    return _REF_PREFIX.sub("", ref or "")


class Formatter:
    """
    Render one event payload as notification lines.

    A formatter wraps exactly one payload and is discarded after
    :meth:`format`. Subclasses implement :meth:`summary` and, when the
    summary links somewhere, :meth:`summary_url`.
    """

    def __init__(
        self,
        payload: Mapping[str, Any] | None,
        shortener: UrlShortener | None = None,
    ):
        self.payload = Payload(payload)
        self.shortener = shortener

    def extract(self, *path: str | int) -> Any:
        return self.payload.extract(*path)

    def format(self) -> list[str]:
        """Return the summary line followed by any detail lines."""
        return [self.summary_line(), *self.details()]

    def summary_line(self) -> str:
        url = self.url()
        if not url:
            return self.summary()
        return f"{self.summary()}: {format_url(url)}"

    def summary(self) -> str:
        raise NotImplementedError

    def summary_url(self) -> str:
        return ""

    def details(self) -> list[str]:
        return []

    def url(self) -> str:
        return shorten_url(self.summary_url(), self.shortener)

    @property
    def repository_name(self) -> str:
        return self.payload.text("repository", "name")

    @property
    def repository_url(self) -> str:
        return self.payload.text("repository", "url")

    @property
    def sender_name(self) -> str:
        return self.payload.text("sender", "login")
