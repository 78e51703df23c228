"""Unit tests — ClassifyMeaninglessChangesSkill (AsyncMock for VcsPort)."""

from unittest.mock import AsyncMock

import pytest

from nodiff.core.application.exceptions import DiffExecutionError
from nodiff.core.application.skills.classify.classify_meaningless_changes_skill import (
    ClassifyChangesInput,
    ClassifyMeaninglessChangesSkill,
)


def _fake_vcs(changed: list[str], meaningful: list[str]) -> AsyncMock:
    vcs = AsyncMock()

    async def _diff(base, head, path_filter=(), ignore_whitespace=False):
        return list(meaningful if ignore_whitespace else changed)

    vcs.diff_file_list.side_effect = _diff
    return vcs


class TestClassifyMeaninglessChangesSkill:
    async def test_result_is_changed_minus_meaningful_in_order(self) -> None:
        vcs = _fake_vcs(["d.txt", "a.js", "c.md", "b.js"], meaningful=["b.js", "d.txt"])
        skill = ClassifyMeaninglessChangesSkill(vcs)

        result = await skill.execute(ClassifyChangesInput(base_ref="main"))

        assert result.paths == ("a.js", "c.md")

    async def test_passes_remote_base_head_and_filter(self) -> None:
        vcs = _fake_vcs(["a.js", "b.js"], meaningful=["b.js"])
        skill = ClassifyMeaninglessChangesSkill(vcs, remote="upstream")

        result = await skill.execute(ClassifyChangesInput(base_ref="main", path_filter=("*.js",)))

        assert result.paths == ("a.js",)
        first, second = vcs.diff_file_list.await_args_list
        assert first.args == ("upstream/main", "HEAD", ("*.js",))
        assert second.args == ("upstream/main", "HEAD", ("*.js",))
        assert second.kwargs == {"ignore_whitespace": True}

    async def test_nothing_changed_skips_second_diff(self) -> None:
        vcs = _fake_vcs([], meaningful=[])
        skill = ClassifyMeaninglessChangesSkill(vcs)

        result = await skill.execute(ClassifyChangesInput(base_ref="main"))

        assert result.is_empty()
        vcs.diff_file_list.assert_awaited_once()

    async def test_all_meaningful_gives_empty_result(self) -> None:
        vcs = _fake_vcs(["a.js"], meaningful=["a.js"])
        result = await ClassifyMeaninglessChangesSkill(vcs).execute(ClassifyChangesInput("main"))
        assert result.is_empty()

    async def test_is_idempotent(self) -> None:
        vcs = _fake_vcs(["a.js", "b.js"], meaningful=["b.js"])
        skill = ClassifyMeaninglessChangesSkill(vcs)

        first = await skill.execute(ClassifyChangesInput("main"))
        second = await skill.execute(ClassifyChangesInput("main"))

        assert first == second

    async def test_diff_failure_propagates(self) -> None:
        vcs = AsyncMock()
        vcs.diff_file_list.side_effect = DiffExecutionError("boom", stderr="fatal: bad revision")

        with pytest.raises(DiffExecutionError):
            await ClassifyMeaninglessChangesSkill(vcs).execute(ClassifyChangesInput("main"))
