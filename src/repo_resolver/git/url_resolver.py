"""URL builders for target repositories."""

import re

from repo_resolver.core.models.provider import GitProvider
from repo_resolver.core.models.repository import TargetRepository
from repo_resolver.git.provider_resolver import (
    is_github_provider,
    resolve_api_base_url,
    resolve_web_base_url,
)
from repo_resolver.providers.registry import GITHUB_HOSTNAME


def clone_url(repo: TargetRepository) -> str:
    """Get the HTTPS clone URL, e.g. ``https://github.com/org/repo.git``."""
    return f"{web_url(repo)}.git"


def web_url(repo: TargetRepository) -> str:
    return f"{resolve_web_base_url(repo)}/{repo.owner}/{repo.repo}"


def issue_url(repo: TargetRepository, issue_number: int) -> str:
    return f"{web_url(repo)}/issues/{issue_number}"


def pull_request_url(repo: TargetRepository, pr_number: int) -> str:
    """Get the web URL of a pull request.

    GitHub uses ``/pull/{n}``; Gitea and Forgejo use ``/pulls/{n}``.
    """
    segment = "pull" if is_github_provider(repo) else "pulls"
    return f"{web_url(repo)}/{segment}/{pr_number}"


def api_resource_url(repo: TargetRepository) -> str:
    return f"{resolve_api_base_url(repo)}/repos/{repo.owner}/{repo.repo}"


def detect_provider_from_url(url: str) -> GitProvider:
    """Guess the provider behind a repository URL.

    Best-effort only: anything that is not on github.com is assumed to be
    Gitea, since Forgejo instances cannot be told apart by URL. An explicit
    ``TargetRepository.provider`` always takes precedence over this guess.
    """
    if GITHUB_HOSTNAME in normalize_remote_url(url):
        return GitProvider.GITHUB
    return GitProvider.GITEA


def normalize_remote_url(url: str) -> str:
    """Normalize a git remote URL to an HTTPS base URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    """
    # Strip .git suffix
    url = re.sub(r"\.git$", "", url)
    # Convert SSH to HTTPS
    ssh_match = re.match(r"git@([^:]+):(.+)", url)
    if ssh_match:
        host, path = ssh_match.groups()
        return f"https://{host}/{path}"
    return url
