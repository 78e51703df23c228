from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ChangeSet:
    """Ordered, immutable list of paths changed between a base ref and HEAD."""

    paths: tuple[str, ...] = ()

    @classmethod
    def of(cls, paths: Iterable[str]) -> "ChangeSet":
        return cls(paths=tuple(p for p in paths if p))

    def without(self, excluded: Iterable[str]) -> "ChangeSet":
        """Set difference that keeps the original ordering of ``self``."""
        excluded_set = set(excluded)
        return ChangeSet(paths=tuple(p for p in self.paths if p not in excluded_set))

    def is_empty(self) -> bool:
        return not self.paths

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)
