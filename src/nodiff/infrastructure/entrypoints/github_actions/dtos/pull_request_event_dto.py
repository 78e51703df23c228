from pydantic import BaseModel


class GitHubUserDTO(BaseModel):
    login: str


class GitRefDTO(BaseModel):
    ref: str
    sha: str | None = None


class PullRequestDTO(BaseModel):
    number: int
    user: GitHubUserDTO
    base: GitRefDTO
    head: GitRefDTO


class RepositoryDTO(BaseModel):
    name: str
    owner: GitHubUserDTO


class PullRequestEventDTO(BaseModel):
    action: str | None = None
    pull_request: PullRequestDTO
    repository: RepositoryDTO
