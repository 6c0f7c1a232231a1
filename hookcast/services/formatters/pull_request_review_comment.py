"""Pull request review comment formatting."""

from __future__ import annotations

from hookcast.services.formatters.base import Formatter
from hookcast.services.text import (
    format_hash,
    format_repository,
    format_user,
    prettify,
    sanitize,
)

DEFAULT_FORMAT = (
    "[{repository}] {sender} commented on pull request #{number} {hash}: {short}"
)


class PullRequestReviewCommentFormatter(Formatter):
    """Formats ``pull_request_review_comment`` events."""

    def summary(self) -> str:
        return DEFAULT_FORMAT.format(
            repository=format_repository(self.repository_name),
            sender=format_user(self.sender_name),
            number=sanitize(self.pull_number),
            hash=format_hash(self.commit_id[:7]),
            short=prettify(self.comment_body),
        )

    def summary_url(self) -> str:
        return self.payload.text("comment", "html_url")

    @property
    def comment_body(self) -> str:
        return self.payload.text("comment", "body")

    @property
    def commit_id(self) -> str:
        return self.payload.text("comment", "commit_id")

    @property
    def pull_number(self) -> str:
        return self.payload.text("pull_request", "number")
