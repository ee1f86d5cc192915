"""Git integration module for Repo-Resolver."""

from repo_resolver.git.commands import git_clone_command, repo_absolute_path
from repo_resolver.git.credentials import credential_config
from repo_resolver.git.provider_resolver import (
    is_github_provider,
    is_self_hosted_provider,
    resolve_api_base_url,
    resolve_provider,
    resolve_web_base_url,
)
from repo_resolver.git.url_resolver import (
    api_resource_url,
    clone_url,
    detect_provider_from_url,
    issue_url,
    pull_request_url,
    web_url,
)

__all__ = [
    "api_resource_url",
    "clone_url",
    "credential_config",
    "detect_provider_from_url",
    "git_clone_command",
    "is_github_provider",
    "is_self_hosted_provider",
    "issue_url",
    "pull_request_url",
    "repo_absolute_path",
    "resolve_api_base_url",
    "resolve_provider",
    "resolve_web_base_url",
    "web_url",
]
