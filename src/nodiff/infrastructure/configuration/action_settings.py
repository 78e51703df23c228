from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ActionSettings(BaseSettings):
    """Inputs and runner variables the Actions runner exports to the step's environment."""

    # ── Action inputs (action.yml) ──
    respond_with: str = Field(default="", alias="INPUT_RESPOND-WITH")
    files_to_judge: str = Field(default="", alias="INPUT_FILES-TO-JUDGE")
    github_token: SecretStr | None = Field(default=None, alias="INPUT_GITHUB-TOKEN")

    # ── Runner context ──
    event_name: str = Field(default="", alias="GITHUB_EVENT_NAME")
    event_path: Path | None = Field(default=None, alias="GITHUB_EVENT_PATH")
    output_path: Path | None = Field(default=None, alias="GITHUB_OUTPUT")
    workspace: Path = Field(default=Path("."), alias="GITHUB_WORKSPACE")
    api_url: str = Field(default="https://api.github.com", alias="GITHUB_API_URL")
    remote: str = Field(default="origin", alias="NODIFF_REMOTE")

    # ── Observability ──
    runner_debug: bool = Field(default=False, alias="RUNNER_DEBUG")
    log_format: str = Field(default="console", alias="LOG_FORMAT")

    @field_validator("github_token", mode="before")
    @classmethod
    def empty_token_is_missing(cls, value: object) -> object:
        """The runner exports unset inputs as empty strings."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("event_path", "output_path", mode="before")
    @classmethod
    def empty_path_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)
