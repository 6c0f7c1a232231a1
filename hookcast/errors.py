"""Exceptions raised by hookcast."""

from __future__ import annotations


class HookcastError(RuntimeError):
    """Base class for errors raised by hookcast."""


class ShortenerError(HookcastError):
    """The URL-shortening service could not shorten a URL."""
