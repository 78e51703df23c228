from pydantic import BaseModel, ConfigDict, Field, StrictBool


class ResponseConfig(BaseModel):
    """What to do when meaningless changes are found. Every option is optional and combinable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    request_reviewers: tuple[str, ...] | None = Field(default=None, alias="requestReviewers")
    comment: str | None = None
    fail: StrictBool | None = None

    @property
    def wants_reviewers(self) -> bool:
        return bool(self.request_reviewers)

    @property
    def wants_comment(self) -> bool:
        return bool(self.comment)

    @property
    def wants_failure(self) -> bool:
        return bool(self.fail)

    @property
    def needs_hosting_access(self) -> bool:
        """Reviewer requests and comments go through the hosting API and need a token."""
        return self.wants_reviewers or self.wants_comment
