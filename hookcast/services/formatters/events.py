"""Formatters for events that render as a single interpolated line."""

from __future__ import annotations

from hookcast.services.formatters.base import Formatter
from hookcast.services.text import (
    format_branch,
    format_dangerous,
    format_hash,
    format_repository,
    format_user,
    prettify,
    sanitize,
)


class _SenderFormatter(Formatter):
    @property
    def prefix(self) -> str:
        return f"[{format_repository(self.repository_name)}] {format_user(self.sender_name)}"


class PingFormatter(Formatter):
    def summary(self) -> str:
        return (
            f"[{format_repository(self.repository_name)}] received ping: "
            f"{prettify(self.payload.text('zen'))}"
        )


class IssuesFormatter(_SenderFormatter):
    def summary(self) -> str:
        action = sanitize(self.payload.text("action"))
        number = sanitize(self.payload.text("issue", "number"))
        title = prettify(self.payload.text("issue", "title"))
        return f"{self.prefix} {action} issue #{number}: {title}"

    def summary_url(self) -> str:
        return self.payload.text("issue", "html_url")


class IssueCommentFormatter(_SenderFormatter):
    def summary(self) -> str:
        number = sanitize(self.payload.text("issue", "number"))
        body = prettify(self.payload.text("comment", "body"))
        return f"{self.prefix} commented on issue #{number}: {body}"

    def summary_url(self) -> str:
        return self.payload.text("comment", "html_url")


class CommitCommentFormatter(_SenderFormatter):
    def summary(self) -> str:
        sha = self.payload.text("comment", "commit_id")[:7]
        body = prettify(self.payload.text("comment", "body"))
        return f"{self.prefix} commented on commit {format_hash(sha)}: {body}"

    def summary_url(self) -> str:
        return self.payload.text("comment", "html_url")


class PullRequestFormatter(_SenderFormatter):
    """Formats ``pull_request`` events; a merged close reads as ``merged``."""

    def summary(self) -> str:
        action = self.payload.text("action")
        if action == "closed" and self.extract("pull_request", "merged") is True:
            action = "merged"
        number = sanitize(self.payload.text("pull_request", "number"))
        title = prettify(self.payload.text("pull_request", "title"))
        base = format_branch(self.payload.text("pull_request", "base", "ref"))
        head = format_branch(self.payload.text("pull_request", "head", "ref"))
        return (
            f"{self.prefix} {sanitize(action)} pull request #{number}: {title}"
            f" ({base}...{head})"
        )

    def summary_url(self) -> str:
        return self.payload.text("pull_request", "html_url")


class PullRequestReviewFormatter(_SenderFormatter):
    def summary(self) -> str:
        state = self.payload.text("review", "state").lower().replace("_", " ")
        number = sanitize(self.payload.text("pull_request", "number"))
        msg = f"{self.prefix} {sanitize(state)} pull request #{number}"
        body = prettify(self.payload.text("review", "body"))
        if body:
            msg += f": {body}"
        return msg

    def summary_url(self) -> str:
        return self.payload.text("review", "html_url")


class CreateFormatter(_SenderFormatter):
    def summary(self) -> str:
        ref_type = sanitize(self.payload.text("ref_type"))
        return f"{self.prefix} created {ref_type} {format_branch(self.payload.text('ref'))}"


class DeleteFormatter(_SenderFormatter):
    def summary(self) -> str:
        ref_type = sanitize(self.payload.text("ref_type"))
        return (
            f"{self.prefix} {format_dangerous('deleted')} {ref_type}"
            f" {format_branch(self.payload.text('ref'))}"
        )


class ForkFormatter(_SenderFormatter):
    def summary(self) -> str:
        forkee = format_repository(self.payload.text("forkee", "full_name"))
        return f"{self.prefix} forked the repository to {forkee}"

    def summary_url(self) -> str:
        return self.payload.text("forkee", "html_url")


class PublicFormatter(_SenderFormatter):
    def summary(self) -> str:
        return f"{self.prefix} made the repository public"

    def summary_url(self) -> str:
        return self.payload.text("repository", "html_url")
