"""Target repository models."""

from pydantic import BaseModel, Field

from repo_resolver.core.models.provider import ProviderConfig


class TargetRepository(BaseModel):
    """A repository an agent works against.

    A missing ``provider`` means the repository lives on GitHub.
    """

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    branch: str | None = None
    base_commit: str | None = None
    provider: ProviderConfig | None = None

    class Config:
        frozen = True
