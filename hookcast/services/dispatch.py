"""Select a formatter for an event kind and render its lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from hookcast.services.formatters.base import Formatter
from hookcast.services.formatters.events import (
    CommitCommentFormatter,
    CreateFormatter,
    DeleteFormatter,
    ForkFormatter,
    IssueCommentFormatter,
    IssuesFormatter,
    PingFormatter,
    PublicFormatter,
    PullRequestFormatter,
    PullRequestReviewFormatter,
)
from hookcast.services.formatters.pull_request_review_comment import (
    PullRequestReviewCommentFormatter,
)
from hookcast.services.formatters.push import PushFormatter
from hookcast.services.text import UrlShortener

logger = logging.getLogger(__name__)

FORMATTERS: dict[str, type[Formatter]] = {
    "commit_comment": CommitCommentFormatter,
    "create": CreateFormatter,
    "delete": DeleteFormatter,
    "fork": ForkFormatter,
    "issue_comment": IssueCommentFormatter,
    "issues": IssuesFormatter,
    "ping": PingFormatter,
    "public": PublicFormatter,
    "pull_request": PullRequestFormatter,
    "pull_request_review": PullRequestReviewFormatter,
    "pull_request_review_comment": PullRequestReviewCommentFormatter,
    "push": PushFormatter,
}


@dataclass(frozen=True)
class Rendered:
    """Lines produced for a supported event, summary first."""

    event: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class Unsupported:
    """No formatter is registered for ``event``."""

    event: str


RenderResult = Union[Rendered, Unsupported]


def render_event(
    event: str | None,
    payload: Mapping[str, Any] | None,
    *,
    shortener: UrlShortener | None = None,
) -> RenderResult:
    """
    Render ``payload`` with the formatter registered for ``event``.

    Returns
    -------
    Rendered
        When a formatter exists; ``lines`` holds at least the summary.
    Unsupported
        When ``event`` has no formatter. This is routine, not an error.
    """
    event_key = (event or "").strip().lower()
    formatter_cls = FORMATTERS.get(event_key)
    if formatter_cls is None:
        logger.info("No formatter for event %r; ignoring", event_key)
        return Unsupported(event_key)

    logger.debug("Formatting %s event with %s", event_key, formatter_cls.__name__)
    try:
        lines = formatter_cls(payload, shortener).format()
    except Exception:
        logger.exception("Formatter %s failed", formatter_cls.__name__)
        raise
    return Rendered(event_key, tuple(lines))
