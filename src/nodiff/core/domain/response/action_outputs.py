from dataclasses import dataclass

from nodiff.core.domain.change import ChangeSet


@dataclass(frozen=True)
class ActionOutputs:
    """The two named outputs published for a run with meaningless changes."""

    files: str
    files_as_markdown_list: str

    @classmethod
    def from_change_set(cls, change_set: ChangeSet) -> "ActionOutputs":
        return cls(
            files=" ".join(change_set.paths),
            files_as_markdown_list="\n".join(f"- {path}" for path in change_set.paths),
        )

    def to_dict(self) -> dict[str, str]:
        """Output names as seen by workflows; also the template variables for messages."""
        return {
            "files": self.files,
            "filesAsMarkdownList": self.files_as_markdown_list,
        }
