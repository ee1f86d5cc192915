"""Core domain models and exceptions for Repo-Resolver."""

from repo_resolver.core.exceptions import (
    MalformedBaseUrlError,
    MissingCredentialsError,
    MissingRepositoryNameError,
    RepoResolverError,
    UnsupportedProviderError,
)
from repo_resolver.core.models import (
    GitProvider,
    ProviderConfig,
    TargetRepository,
    ToolServerInvocation,
    ToolServerTemplate,
)

__all__ = [
    # Models
    "GitProvider",
    "ProviderConfig",
    "TargetRepository",
    "ToolServerTemplate",
    "ToolServerInvocation",
    # Exceptions
    "RepoResolverError",
    "UnsupportedProviderError",
    "MissingCredentialsError",
    "MalformedBaseUrlError",
    "MissingRepositoryNameError",
]
