"""Tests for URL builders."""

import pytest

from factories import SelfHostedRepositoryFactory, TargetRepositoryFactory
from repo_resolver.core.models import GitProvider, ProviderConfig, TargetRepository
from repo_resolver.git.url_resolver import (
    api_resource_url,
    clone_url,
    detect_provider_from_url,
    issue_url,
    normalize_remote_url,
    pull_request_url,
    web_url,
)


@pytest.mark.unit
class TestCloneUrl:
    """Tests for clone_url."""

    def test_github(self) -> None:
        repo = TargetRepository(owner="o", repo="r")
        assert clone_url(repo) == "https://github.com/o/r.git"

    def test_self_hosted_strips_api_suffix(self) -> None:
        repo = TargetRepository(
            owner="o",
            repo="r",
            provider=ProviderConfig(type="gitea", base_url="https://git.example.com/api/v1"),
        )
        assert clone_url(repo) == "https://git.example.com/o/r.git"

    def test_forgejo(self, forgejo_repo: TargetRepository) -> None:
        assert clone_url(forgejo_repo) == "https://forge.example.com/acme/widgets.git"

    def test_idempotent(self) -> None:
        repo = SelfHostedRepositoryFactory()
        assert clone_url(repo) == clone_url(repo)


@pytest.mark.unit
class TestWebUrls:
    """Tests for web, issue and pull request URLs."""

    def test_web_url(self, github_repo: TargetRepository, gitea_repo: TargetRepository) -> None:
        assert web_url(github_repo) == "https://github.com/acme/widgets"
        assert web_url(gitea_repo) == "https://git.example.com/acme/widgets"

    def test_issue_url(self, github_repo: TargetRepository, gitea_repo: TargetRepository) -> None:
        assert issue_url(github_repo, 7) == "https://github.com/acme/widgets/issues/7"
        assert issue_url(gitea_repo, 7) == "https://git.example.com/acme/widgets/issues/7"

    def test_pull_request_url_github(self, github_repo: TargetRepository) -> None:
        assert pull_request_url(github_repo, 42) == "https://github.com/acme/widgets/pull/42"

    def test_pull_request_url_gitea(self, gitea_repo: TargetRepository) -> None:
        assert pull_request_url(gitea_repo, 42) == "https://git.example.com/acme/widgets/pulls/42"

    def test_pull_request_url_forgejo(self, forgejo_repo: TargetRepository) -> None:
        url = pull_request_url(forgejo_repo, 42)
        assert url == "https://forge.example.com/acme/widgets/pulls/42"

    def test_urls_are_deterministic(self) -> None:
        repo = TargetRepositoryFactory()
        assert web_url(repo) == web_url(repo)
        assert issue_url(repo, 1) == issue_url(repo, 1)
        assert pull_request_url(repo, 1) == pull_request_url(repo, 1)


@pytest.mark.unit
class TestApiResourceUrl:
    """Tests for api_resource_url."""

    def test_github(self, github_repo: TargetRepository) -> None:
        assert api_resource_url(github_repo) == "https://api.github.com/repos/acme/widgets"

    def test_gitea(self, gitea_repo: TargetRepository) -> None:
        assert api_resource_url(gitea_repo) == "https://git.example.com/api/v1/repos/acme/widgets"

    def test_forgejo_without_suffix(self, forgejo_repo: TargetRepository) -> None:
        url = api_resource_url(forgejo_repo)
        assert url == "https://forge.example.com/api/v1/repos/acme/widgets"


@pytest.mark.unit
class TestDetectProviderFromUrl:
    """Tests for detect_provider_from_url."""

    def test_github(self) -> None:
        assert detect_provider_from_url("https://github.com/acme/widgets") is GitProvider.GITHUB

    def test_github_ssh(self) -> None:
        assert detect_provider_from_url("git@github.com:acme/widgets.git") is GitProvider.GITHUB

    def test_defaults_to_gitea(self) -> None:
        assert detect_provider_from_url("https://git.example.com/acme/widgets") is GitProvider.GITEA

    def test_forgejo_is_not_detected(self) -> None:
        assert detect_provider_from_url("https://codeberg.org/acme/widgets") is GitProvider.GITEA


@pytest.mark.unit
class TestNormalizeRemoteUrl:
    """Tests for normalize_remote_url."""

    def test_normalize_ssh_url(self) -> None:
        assert normalize_remote_url("git@github.com:org/repo.git") == "https://github.com/org/repo"

    def test_normalize_https_url(self) -> None:
        assert normalize_remote_url("https://github.com/org/repo.git") == "https://github.com/org/repo"

    def test_normalize_clean_url(self) -> None:
        assert normalize_remote_url("https://git.example.com/org/repo") == "https://git.example.com/org/repo"
