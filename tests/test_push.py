"""Push event classification and rendering."""

import copy

import pytest

from hookcast.services.formatters.push import PushFormatter, commit_title, distinct_commits
from hookcast.services.text import strip_formatting

NULL_SHA = "0" * 40
BEFORE = "aaaa111" + "b" * 33
AFTER = "cccc222" + "d" * 33
REPO_URL = "https://github.com/octo/hookcast"
COMPARE_URL = f"{REPO_URL}/compare/aaaa111...cccc222"


def commit(n, message=None, *, distinct=True, author="Jane"):
    data = {
        "id": f"{n:07d}" + "e" * 33,
        "message": message if message is not None else f"Commit number {n}",
        "distinct": distinct,
        "url": f"{REPO_URL}/commit/{n:07d}",
    }
    if author is not None:
        data["author"] = {"name": author}
    return data


def make_push(**overrides):
    payload = {
        "ref": "refs/heads/main",
        "before": BEFORE,
        "after": AFTER,
        "forced": False,
        "compare": COMPARE_URL,
        "pusher": {"name": "alice"},
        "repository": {"name": "hookcast", "url": REPO_URL},
        "commits": [commit(1), commit(2)],
    }
    payload.update(overrides)
    return payload


def render(payload, shortener=None):
    return [strip_formatting(line) for line in PushFormatter(payload, shortener).format()]


class TestClassification:
    def test_created_branch_from_base_ref(self):
        payload = make_push(
            ref="refs/heads/feature/x",
            before=NULL_SHA,
            base_ref="refs/heads/main",
            commits=[commit(1), commit(2), commit(3)],
        )
        lines = render(payload)
        assert lines[0] == (
            "[hookcast] alice created feature/x from main (+3 new commits): "
            + COMPARE_URL
        )
        assert len(lines) == 4

    def test_created_branch_without_base_ref_uses_after_hash(self):
        payload = make_push(ref="refs/heads/topic", before=NULL_SHA, commits=[])
        assert render(payload)[0] == (
            f"[hookcast] alice created topic at cccc222 (+0 new commits): "
            f"{REPO_URL}/commits/topic"
        )

    def test_created_wins_over_forced(self):
        payload = make_push(before=NULL_SHA, forced=True, commits=[commit(1)])
        summary = render(payload)[0]
        assert " created main at cccc222 (+1 new commit)" in summary
        assert "force-pushed" not in summary

    def test_tag_created_at_hash(self):
        payload = make_push(ref="refs/tags/v1.0.0", before=NULL_SHA, commits=[])
        assert render(payload) == [
            f"[hookcast] alice tagged v1.0.0 at cccc222: {REPO_URL}/commits/v1.0.0"
        ]

    def test_tag_created_at_base_ref(self):
        payload = make_push(
            ref="refs/tags/v2", before=NULL_SHA, base_ref="refs/heads/release", forced=True
        )
        summary = render(payload)[0]
        assert summary.startswith("[hookcast] alice tagged v2 at release: ")
        assert "created" not in summary

    def test_deleted(self):
        payload = make_push(ref="refs/heads/old", after=NULL_SHA, commits=[])
        assert render(payload) == [
            f"[hookcast] alice deleted old at aaaa111: {REPO_URL}/commits/aaaa111"
        ]

    def test_deleted_wins_over_forced(self):
        payload = make_push(after=NULL_SHA, forced=True)
        assert " deleted main at aaaa111" in render(payload)[0]

    def test_deleted_uses_dangerous_emphasis(self):
        payload = make_push(after=NULL_SHA, commits=[])
        assert "\x02\x0304deleted\x0f" in PushFormatter(payload).format()[0]

    def test_force_pushed(self):
        payload = make_push(forced=True)
        lines = render(payload)
        assert lines[0] == (
            f"[hookcast] alice force-pushed main from aaaa111 to cccc222: "
            f"{REPO_URL}/commits/main"
        )
        assert len(lines) == 3

    def test_merged(self):
        payload = make_push(
            base_ref="refs/heads/develop",
            commits=[commit(1, distinct=False), commit(2, distinct=False)],
        )
        assert render(payload) == [
            f"[hookcast] alice merged develop into main: {COMPARE_URL}"
        ]

    def test_fast_forwarded(self):
        payload = make_push(commits=[commit(1, distinct=False)])
        assert render(payload) == [
            f"[hookcast] alice fast-forwarded main from aaaa111 to cccc222: {COMPARE_URL}"
        ]

    def test_only_blank_messages_counts_as_fast_forward(self):
        payload = make_push(commits=[commit(1, message="   \n")])
        assert " fast-forwarded main" in render(payload)[0]

    def test_normal_push(self):
        lines = render(make_push())
        assert lines[0] == f"[hookcast] alice pushed 2 new commits to main: {COMPARE_URL}"

    def test_single_commit_links_to_commit(self):
        lines = render(make_push(commits=[commit(7)]))
        assert lines[0] == (
            f"[hookcast] alice pushed 1 new commit to main: {REPO_URL}/commit/0000007"
        )

    def test_push_without_commits(self):
        assert render(make_push(commits=[]))[0] == (
            f"[hookcast] alice pushed 0 new commits to main: {COMPARE_URL}"
        )

    def test_missing_pusher_is_somebody(self):
        payload = make_push()
        del payload["pusher"]
        assert render(payload)[0].startswith("[hookcast] somebody pushed")


class TestCommitLines:
    def test_detail_lines_follow_distinct_commits_in_order(self):
        payload = make_push(
            commits=[
                commit(1, "First"),
                commit(2, "Skipped", distinct=False),
                commit(3, ""),
                commit(4, "Fourth"),
            ]
        )
        assert render(payload)[1:] == [
            "hookcast/main 0000001 Jane: First",
            "hookcast/main 0000004 Jane: Fourth",
        ]

    def test_missing_author_renders_empty(self):
        payload = make_push(commits=[commit(1, "Fix", author=None)])
        assert render(payload)[1] == "hookcast/main 0000001 : Fix"

    def test_commit_line_markup(self):
        line = PushFormatter(make_push(commits=[commit(1, "Fix")])).format()[1]
        assert line == (
            "\x0313hookcast\x0f/\x0306main\x0f \x03140000001\x0f \x0315Jane\x0f: Fix"
        )

    def test_multi_line_message_gets_ellipsis(self):
        payload = make_push(commits=[commit(1, "Title\n\nBody text")])
        assert render(payload)[1].endswith(": Title...")

    def test_injected_control_characters_are_stripped(self):
        payload = make_push(commits=[commit(1, "Fix \x02\x0304bug\x0f now")])
        line = PushFormatter(payload).format()[1]
        assert line.endswith(": Fix 04bug now")


class TestCommitTitle:
    def test_single_line(self):
        assert commit_title("  Add feature  ") == "Add feature"

    def test_single_line_with_trailing_newline(self):
        assert commit_title("Add feature\n") == "Add feature"

    def test_blank_second_line_still_truncates(self):
        assert commit_title("Add feature\n\n") == "Add feature..."

    def test_multiple_lines(self):
        assert commit_title("Add feature\nwith details") == "Add feature..."

    def test_edge_control_characters_leave_no_padding(self):
        assert commit_title("\x02 Add feature \x0f") == "Add feature"

    def test_leading_formatting_codes_keep_the_title(self):
        assert commit_title("\x02" * 120 + "Add feature\nbody") == "Add feature..."


class TestDistinctCommits:
    def test_filter(self):
        commits = [
            commit(1),
            commit(2, distinct=False),
            commit(3, "  "),
            commit(4),
            "not a commit",
        ]
        assert [c["id"][:7] for c in distinct_commits(commits)] == ["0000001", "0000004"]

    def test_idempotent(self):
        commits = [commit(1), commit(2, distinct=False), commit(3, ""), commit(4)]
        once = distinct_commits(commits)
        assert distinct_commits(once) == once


class _Shortener:
    def shorten(self, url):
        return "https://git.io/short"


class _BrokenShortener:
    def shorten(self, url):
        raise ConnectionError("shortener down")


class TestSummaryUrl:
    def test_created_with_distinct_commits_uses_compare(self):
        payload = make_push(before=NULL_SHA, commits=[commit(1)])
        assert PushFormatter(payload).summary_url() == COMPARE_URL

    def test_forced_uses_branch_url(self):
        assert PushFormatter(make_push(forced=True)).summary_url() == f"{REPO_URL}/commits/main"

    def test_shortened_url_is_appended(self):
        assert render(make_push(), _Shortener())[0].endswith(": https://git.io/short")

    def test_shortener_failure_keeps_original_url(self):
        assert render(make_push(), _BrokenShortener())[0].endswith(f": {COMPARE_URL}")

    def test_missing_compare_url_omits_link(self):
        payload = make_push()
        del payload["compare"]
        assert render(payload)[0] == "[hookcast] alice pushed 2 new commits to main"

    def test_missing_compare_url_is_not_shortened(self):
        payload = make_push()
        del payload["compare"]
        assert render(payload, _Shortener())[0] == (
            "[hookcast] alice pushed 2 new commits to main"
        )


class TestRobustness:
    def test_payload_is_not_mutated(self):
        payload = make_push(commits=[commit(1, "A\nB"), commit(2, distinct=False)])
        snapshot = copy.deepcopy(payload)
        PushFormatter(payload).format()
        assert payload == snapshot

    @pytest.mark.parametrize("missing", ["ref", "repository", "commits", "before", "after"])
    def test_missing_fields_still_render_a_summary(self, missing):
        payload = make_push()
        del payload[missing]
        lines = PushFormatter(payload).format()
        assert lines
        assert lines[0]
