"""Push event formatting."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from hookcast.services.formatters.base import Formatter, ref_name
from hookcast.services.text import (
    ELLIPSIS,
    format_branch,
    format_dangerous,
    format_hash,
    format_number,
    format_repository,
    format_user,
    sanitize,
    split_lines,
)

_NULL_SHA = re.compile(r"\A0{40}\Z")
_TAG_REF = re.compile(r"\Arefs/tags/")

DEFAULT_PUSHER = "somebody"


def distinct_commits(commits: Iterable[Any]) -> list[Mapping[str, Any]]:
    """Keep commits flagged ``distinct`` whose message is not blank."""
    return [
        commit
        for commit in commits
        if isinstance(commit, Mapping)
        and commit.get("distinct")
        and str(commit.get("message") or "").strip()
    ]


def commit_title(message: Any) -> str:
    """
    First line of a commit message, stripped.

    The title gains an ellipsis whenever the message spans more than one
    line, even if the following lines are blank.
    """
    lines = split_lines(str(message or ""))
    title = sanitize(lines[0]).strip() if lines else ""
    if len(lines) > 1:
        title += ELLIPSIS
    return title


class PushFormatter(Formatter):
    """Formats ``push`` events."""

    def details(self) -> list[str]:
        return [self.format_commit(commit) for commit in self.distinct_commits]

    def summary(self) -> str:
        msg = f"[{format_repository(self.repository_name)}] {format_user(self.pusher_name)}"
        if self.created:
            if self.tag:
                at = (
                    format_branch(self.base_ref_name)
                    if self.base_ref
                    else format_hash(self.after_sha)
                )
                return f"{msg} tagged {format_branch(self.branch_name)} at {at}"
            origin = (
                f" from {format_branch(self.base_ref_name)}"
                if self.base_ref
                else f" at {format_hash(self.after_sha)}"
            )
            count = format_number(len(self.distinct_commits), "new commit", "new commits")
            return f"{msg} created {format_branch(self.branch_name)}{origin} (+{count})"
        if self.deleted:
            return (
                f"{msg} {format_dangerous('deleted')} {format_branch(self.branch_name)}"
                f" at {format_hash(self.before_sha)}"
            )
        if self.forced:
            return (
                f"{msg} {format_dangerous('force-pushed')} {format_branch(self.branch_name)}"
                f" from {format_hash(self.before_sha)} to {format_hash(self.after_sha)}"
            )
        if self.commits and not self.distinct_commits:
            if self.base_ref:
                return (
                    f"{msg} merged {format_branch(self.base_ref_name)}"
                    f" into {format_branch(self.branch_name)}"
                )
            return (
                f"{msg} fast-forwarded {format_branch(self.branch_name)}"
                f" from {format_hash(self.before_sha)} to {format_hash(self.after_sha)}"
            )
        count = format_number(len(self.distinct_commits), "new commit", "new commits")
        return f"{msg} pushed {count} to {format_branch(self.branch_name)}"

    def summary_url(self) -> str:
        if self.created:
            return self.compare_url if self.distinct_commits else self.branch_url
        if self.deleted:
            return self.before_sha_url
        if self.forced:
            return self.branch_url
        if len(self.distinct_commits) == 1:
            return str(self.distinct_commits[0].get("url") or "")
        return self.compare_url

    def format_commit(self, commit: Mapping[str, Any]) -> str:
        author = commit.get("author")
        name = author.get("name") if isinstance(author, Mapping) else None
        sha = str(commit.get("id") or "")[:7]
        return (
            f"{format_repository(self.repository_name)}/{format_branch(self.branch_name)}"
            f" {format_hash(sha)} {format_user(name)}: {commit_title(commit.get('message'))}"
        )

    @property
    def created(self) -> bool:
        return bool(_NULL_SHA.match(self.payload.text("before")))

    @property
    def deleted(self) -> bool:
        return bool(_NULL_SHA.match(self.payload.text("after")))

    @property
    def forced(self) -> bool:
        return bool(self.extract("forced"))

    @property
    def ref(self) -> str:
        return self.payload.text("ref")

    @property
    def tag(self) -> bool:
        return bool(_TAG_REF.match(self.ref))

    @property
    def branch_name(self) -> str:
        return ref_name(self.ref)

    @property
    def base_ref(self) -> str:
        return self.payload.text("base_ref")

    @property
    def base_ref_name(self) -> str:
        return ref_name(self.base_ref)

    @property
    def pusher_name(self) -> str:
        return self.payload.text("pusher", "name") or DEFAULT_PUSHER

    @property
    def commits(self) -> list[Any]:
        commits = self.extract("commits")
        return list(commits) if isinstance(commits, list) else []

    @property
    def distinct_commits(self) -> list[Mapping[str, Any]]:
        return distinct_commits(self.commits)

    @property
    def before_sha(self) -> str:
        return self.payload.text("before")[:7]

    @property
    def after_sha(self) -> str:
        return self.payload.text("after")[:7]

    @property
    def branch_url(self) -> str:
        return f"{self.repository_url}/commits/{self.branch_name}"

    @property
    def before_sha_url(self) -> str:
        return f"{self.repository_url}/commits/{self.before_sha}"

    @property
    def compare_url(self) -> str:
        return self.payload.text("compare")
