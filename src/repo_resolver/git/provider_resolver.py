"""Provider resolution for target repositories.

Every function here is a pure function of the repository reference.
Self-hosted base URLs follow a single policy: the web base is the
configured URL with any trailing ``/api/v1`` or ``/api`` removed, and the
API base is always ``{web base}/api/v1``.
"""

from repo_resolver.core.models.provider import GitProvider, ProviderConfig
from repo_resolver.core.models.repository import TargetRepository
from repo_resolver.providers.registry import (
    API_PATH_SUFFIX,
    GITHUB_API_URL,
    GITHUB_WEB_URL,
    SELF_HOSTED_DEFAULT_API_URL,
    SELF_HOSTED_DEFAULT_WEB_URL,
    get_default_provider_config,
)

_STRIPPED_SUFFIXES = (API_PATH_SUFFIX, "/api")


def resolve_provider(repo: TargetRepository) -> GitProvider:
    """Get the provider for a repository, defaulting to GitHub."""
    if repo.provider is not None:
        return repo.provider.type
    return GitProvider.GITHUB


def resolve_provider_config(repo: TargetRepository) -> ProviderConfig:
    """Get the explicit provider config, or the built-in GitHub defaults."""
    if repo.provider is not None:
        return repo.provider
    return get_default_provider_config(GitProvider.GITHUB)


def is_github_provider(repo: TargetRepository) -> bool:
    return resolve_provider(repo) is GitProvider.GITHUB


def is_self_hosted_provider(repo: TargetRepository) -> bool:
    return resolve_provider(repo).is_self_hosted


def resolve_web_base_url(repo: TargetRepository) -> str:
    """Get the browsable host URL for the repository's provider."""
    if is_github_provider(repo):
        return GITHUB_WEB_URL

    base_url = repo.provider.base_url if repo.provider else None
    if not base_url:
        return SELF_HOSTED_DEFAULT_WEB_URL
    return _strip_api_suffix(base_url)


def resolve_api_base_url(repo: TargetRepository) -> str:
    """Get the REST API base URL for the repository's provider."""
    if is_github_provider(repo):
        return GITHUB_API_URL

    base_url = repo.provider.base_url if repo.provider else None
    if not base_url:
        return SELF_HOSTED_DEFAULT_API_URL
    return f"{_strip_api_suffix(base_url)}{API_PATH_SUFFIX}"


def _strip_api_suffix(base_url: str) -> str:
    url = base_url.rstrip("/")
    for suffix in _STRIPPED_SUFFIXES:
        if url.endswith(suffix):
            return url[: -len(suffix)]
    return url
