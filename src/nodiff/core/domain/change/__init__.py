from nodiff.core.domain.change.change_set import ChangeSet
from nodiff.core.domain.change.path_filter import parse_path_filter

__all__ = ["ChangeSet", "parse_path_filter"]
