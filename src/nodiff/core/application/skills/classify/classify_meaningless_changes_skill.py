import logging
from dataclasses import dataclass

from nodiff.core.application.ports import VcsPort
from nodiff.core.application.skills.skill import BaseSkill
from nodiff.core.domain.change import ChangeSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassifyChangesInput:
    """Input contract for the classification step."""

    base_ref: str
    path_filter: tuple[str, ...] = ()
    head_ref: str = "HEAD"


class ClassifyMeaninglessChangesSkill(BaseSkill[ClassifyChangesInput, ChangeSet]):
    """Finds the changed files whose every change is whitespace or blank lines.

    Both file lists come from the diff primitive; this step only subtracts
    the meaningful list from the full one, keeping the full list's order.
    """

    def __init__(self, vcs: VcsPort, remote: str = "origin") -> None:
        self._vcs = vcs
        self._remote = remote

    async def execute(self, input_data: ClassifyChangesInput) -> ChangeSet:
        base = f"{self._remote}/{input_data.base_ref}"
        changed = ChangeSet.of(
            await self._vcs.diff_file_list(base, input_data.head_ref, input_data.path_filter)
        )
        if changed.is_empty():
            logger.info("[ClassifyChanges] No files changed against %s", base)
            return changed

        meaningful = await self._vcs.diff_file_list(
            base, input_data.head_ref, input_data.path_filter, ignore_whitespace=True
        )
        meaningless = changed.without(meaningful)
        logger.info(
            "[ClassifyChanges] %d changed, %d meaningless against %s",
            len(changed),
            len(meaningless),
            base,
        )
        return meaningless
