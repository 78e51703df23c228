from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestContext:
    """Read-only facts about the pull request that triggered the run."""

    number: int
    author: str
    owner: str
    repo: str
    base_ref: str
    head_ref: str
    head_sha: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
