"""Git command helpers for cloning target repositories."""

import os

from repo_resolver.config.settings import Settings, get_settings
from repo_resolver.core.exceptions import MissingRepositoryNameError
from repo_resolver.core.models.repository import TargetRepository
from repo_resolver.git.provider_resolver import resolve_api_base_url
from repo_resolver.git.url_resolver import clone_url


def repo_absolute_path(repo: TargetRepository, settings: Settings | None = None) -> str:
    """Get the directory the repository is (or will be) checked out in.

    In local mode this is the local working directory; otherwise the
    repository lives under the sandbox root.
    """
    settings = settings or get_settings()
    if settings.local_mode:
        return settings.local_working_directory or os.getcwd()

    if not repo.repo:
        raise MissingRepositoryNameError()

    return f"{settings.sandbox_root_dir.rstrip('/')}/{repo.repo}"


def git_clone_command(repo: TargetRepository, settings: Settings | None = None) -> list[str]:
    """Build the argv for cloning the repository into its absolute path."""
    command = ["git", "clone"]
    if repo.branch:
        command.extend(["--branch", repo.branch])
    command.extend([clone_url(repo), repo_absolute_path(repo, settings)])
    return command


def git_remote_url(repo: TargetRepository, remote_name: str = "origin") -> str:
    """Get the URL for a git remote.

    All remotes point at the clone URL; ``remote_name`` is accepted so call
    sites can pass it through.
    """
    return clone_url(repo)


def git_api_base_url(repo: TargetRepository) -> str:
    return resolve_api_base_url(repo)
