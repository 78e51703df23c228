from abc import ABC, abstractmethod
from collections.abc import Sequence


class VcsPort(ABC):
    """Read-only access to the local working copy."""

    @abstractmethod
    async def fetch_ref(self, ref_name: str) -> None:
        """Make ``origin/<ref_name>`` available locally. No-op when it already is."""

    @abstractmethod
    async def diff_file_list(
        self,
        base_ref: str,
        head_ref: str,
        path_filter: Sequence[str] = (),
        ignore_whitespace: bool = False,
    ) -> list[str]:
        """Paths changed between the two refs, in diff order.

        With ``ignore_whitespace`` only paths whose diff survives ignoring
        space-amount changes and blank lines are returned.
        """
