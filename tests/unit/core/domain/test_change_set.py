"""Unit tests — ChangeSet, path filter parsing and ActionOutputs."""

from nodiff.core.domain.change import ChangeSet, parse_path_filter
from nodiff.core.domain.response import ActionOutputs


class TestChangeSet:
    def test_without_keeps_original_order(self) -> None:
        changed = ChangeSet.of(["c.js", "a.js", "b.js", "d.js"])

        result = changed.without(["d.js", "a.js"])

        assert result.paths == ("c.js", "b.js")

    def test_without_is_a_subset_and_ignores_unknown_paths(self) -> None:
        changed = ChangeSet.of(["a.js", "b.js"])

        result = changed.without(["zzz.js"])

        assert set(result.paths) <= set(changed.paths)
        assert result == changed

    def test_of_drops_empty_entries(self) -> None:
        assert ChangeSet.of(["", "a.js", ""]).paths == ("a.js",)

    def test_does_not_mutate_original(self) -> None:
        changed = ChangeSet.of(["a.js", "b.js"])
        changed.without(["a.js"])
        assert changed.paths == ("a.js", "b.js")

    def test_empty(self) -> None:
        assert ChangeSet().is_empty()
        assert not ChangeSet.of(["a"]).is_empty()


class TestParsePathFilter:
    def test_empty_means_all_files(self) -> None:
        assert parse_path_filter("") == ()
        assert parse_path_filter(None) == ()

    def test_splits_on_spaces_and_newlines(self) -> None:
        assert parse_path_filter("*.js\nsrc/*.py  docs/\n") == ("*.js", "src/*.py", "docs/")


class TestActionOutputs:
    def test_single_file(self) -> None:
        outputs = ActionOutputs.from_change_set(ChangeSet.of(["a.js"]))

        assert outputs.to_dict() == {"files": "a.js", "filesAsMarkdownList": "- a.js"}

    def test_multiple_files(self) -> None:
        outputs = ActionOutputs.from_change_set(ChangeSet.of(["a.js", "lib/b.js"]))

        assert outputs.files == "a.js lib/b.js"
        assert outputs.files_as_markdown_list == "- a.js\n- lib/b.js"
