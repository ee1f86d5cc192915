"""Git provider models."""

from enum import Enum

from pydantic import BaseModel, Field


class GitProvider(str, Enum):
    """Supported Git hosting providers."""

    GITHUB = "github"
    GITEA = "gitea"
    FORGEJO = "forgejo"

    @property
    def is_self_hosted(self) -> bool:
        return self is not GitProvider.GITHUB


class ProviderConfig(BaseModel):
    """Provider settings attached to a target repository.

    ``base_url`` and ``api_token`` only matter for self-hosted instances.
    """

    type: GitProvider
    base_url: str | None = None
    api_token: str | None = Field(default=None, repr=False)
    tool_server_name: str | None = None

    class Config:
        frozen = True
