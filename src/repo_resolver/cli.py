"""CLI for Repo-Resolver."""

import json
import shlex
import sys

import click
import structlog
from pydantic import ValidationError

from repo_resolver.config.logging import configure_logging
from repo_resolver.config.settings import get_settings
from repo_resolver.core.exceptions import RepoResolverError
from repo_resolver.core.models import GitProvider, ProviderConfig, TargetRepository

logger = structlog.get_logger(__name__)

PROVIDER_CHOICES = click.Choice([p.value for p in GitProvider])


def _build_repo(
    owner: str,
    repo: str,
    provider: str | None,
    base_url: str | None,
    branch: str | None = None,
) -> TargetRepository:
    provider_config = None
    if provider is not None:
        provider_config = ProviderConfig(type=provider, base_url=base_url)
    return TargetRepository(owner=owner, repo=repo, branch=branch, provider=provider_config)


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def provider_options(func):
    """Shared --provider/--base-url options."""
    func = click.option(
        "--base-url", "-u", help="Self-hosted provider URL (web or API base)"
    )(func)
    func = click.option(
        "--provider", "-p", type=PROVIDER_CHOICES, help="Git provider (default: github)"
    )(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """Repo-Resolver: provider-aware URLs and tool servers for Git repositories."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_format=settings.log_json)


@cli.command()
@click.argument("owner")
@click.argument("repo")
@provider_options
def urls(owner: str, repo: str, provider: str | None, base_url: str | None) -> None:
    """Show the URLs derived for a repository."""
    from repo_resolver.git.provider_resolver import (
        resolve_api_base_url,
        resolve_provider,
        resolve_web_base_url,
    )
    from repo_resolver.git.url_resolver import api_resource_url, clone_url, web_url

    try:
        target = _build_repo(owner, repo, provider, base_url)
    except ValidationError as e:
        _fail(e)
        return

    click.echo(f"Provider:  {resolve_provider(target).value}")
    click.echo(f"API base:  {resolve_api_base_url(target)}")
    click.echo(f"Web base:  {resolve_web_base_url(target)}")
    click.echo(f"Clone:     {clone_url(target)}")
    click.echo(f"Web:       {web_url(target)}")
    click.echo(f"API:       {api_resource_url(target)}")


@cli.command("clone-command")
@click.argument("owner")
@click.argument("repo")
@provider_options
@click.option("--branch", "-b", help="Branch to check out")
def clone_command(
    owner: str, repo: str, provider: str | None, base_url: str | None, branch: str | None
) -> None:
    """Print the git clone command for a repository."""
    from repo_resolver.git.commands import git_clone_command

    try:
        target = _build_repo(owner, repo, provider, base_url, branch=branch)
        command = git_clone_command(target)
    except (RepoResolverError, ValidationError) as e:
        _fail(e)
        return

    click.echo(shlex.join(command))


@cli.command()
@click.argument("owner")
@click.argument("repo")
@provider_options
def credentials(owner: str, repo: str, provider: str | None, base_url: str | None) -> None:
    """Print the git credential config entries for a repository."""
    from repo_resolver.git.credentials import credential_config

    try:
        target = _build_repo(owner, repo, provider, base_url)
        config = credential_config(target)
    except (RepoResolverError, ValidationError) as e:
        _fail(e)
        return

    for key, value in config.items():
        click.echo(f"{key}={value}")


@cli.command("tool-server")
@click.argument("provider", type=PROVIDER_CHOICES)
@click.option("--base-url", "-u", help="Provider base URL")
@click.option(
    "--token", "-t", envvar="REPO_RESOLVER_TOKEN", help="API token (env: REPO_RESOLVER_TOKEN)"
)
def tool_server(provider: str, base_url: str | None, token: str | None) -> None:
    """Print the MCP tool-server invocation for a provider as JSON."""
    from repo_resolver.mcp.tool_server import build_tool_server_config, tool_server_name

    try:
        config = ProviderConfig(type=provider, base_url=base_url, api_token=token)
        invocation = build_tool_server_config(config)
    except (RepoResolverError, ValidationError) as e:
        _fail(e)
        return

    if invocation is None:
        click.echo(f"{provider} does not use a tool server.")
        return

    payload = {"name": tool_server_name(provider), **invocation.model_dump()}
    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    cli()
