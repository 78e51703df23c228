"""Unit tests — reviewer selection."""

from nodiff.core.application.skills.respond.reviewer_selection import select_reviewers


class TestSelectReviewers:
    def test_excludes_author(self) -> None:
        assert select_reviewers(["fred", "dabrady", "george"], "dabrady") == ["fred", "george"]

    def test_author_not_requested_returns_handles_unchanged(self) -> None:
        handles = ["alice", "bob", "carol"]
        assert select_reviewers(handles, "dave") == handles

    def test_match_is_case_sensitive(self) -> None:
        assert select_reviewers(["Alice", "bob"], "alice") == ["Alice", "bob"]

    def test_only_author_gives_empty_result(self) -> None:
        assert select_reviewers(["alice"], "alice") == []
