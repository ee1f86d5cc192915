"""Pytest configuration and fixtures."""

import pytest

from repo_resolver.config.settings import Settings
from repo_resolver.core.models import GitProvider, ProviderConfig, TargetRepository


@pytest.fixture
def github_repo() -> TargetRepository:
    """A repository without an explicit provider (GitHub)."""
    return TargetRepository(owner="acme", repo="widgets")


@pytest.fixture
def gitea_repo() -> TargetRepository:
    """A repository on a self-hosted Gitea instance."""
    return TargetRepository(
        owner="acme",
        repo="widgets",
        provider=ProviderConfig(
            type=GitProvider.GITEA,
            base_url="https://git.example.com/api/v1",
            api_token="gitea-token",
        ),
    )


@pytest.fixture
def forgejo_repo() -> TargetRepository:
    """A repository on a self-hosted Forgejo instance."""
    return TargetRepository(
        owner="acme",
        repo="widgets",
        provider=ProviderConfig(
            type=GitProvider.FORGEJO,
            base_url="https://forge.example.com",
            api_token="forge-token",
        ),
    )


@pytest.fixture
def sandbox_settings() -> Settings:
    """Settings pointing at a fixed sandbox root, ignoring the environment."""
    return Settings(_env_file=None, sandbox_root_dir="/sandbox", local_mode=False)
