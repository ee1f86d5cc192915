"""MCP tool-server configuration for self-hosted Git providers."""

from collections.abc import Mapping

import structlog

from repo_resolver.core.exceptions import MissingCredentialsError
from repo_resolver.core.models.provider import GitProvider, ProviderConfig
from repo_resolver.core.models.tool_server import ToolServerInvocation
from repo_resolver.providers.registry import get_tool_server_template, parse_provider

logger = structlog.get_logger(__name__)


def build_tool_server_config(provider: ProviderConfig) -> ToolServerInvocation | None:
    """Fill the provider's tool-server template with its base URL and token.

    GitHub is handled through direct API calls, so it returns ``None``.

    Raises:
        UnsupportedProviderError: If the provider has no template.
        MissingCredentialsError: If ``base_url`` or ``api_token`` is missing.
    """
    provider_type = parse_provider(provider.type)
    if provider_type is GitProvider.GITHUB:
        return None

    if not provider.base_url or not provider.api_token:
        raise MissingCredentialsError(provider_type.value)

    template = get_tool_server_template(provider_type)
    prefix = provider_type.value.upper()
    replacements = {
        f"{prefix}_BASE_URL": provider.base_url,
        f"{prefix}_TOKEN": provider.api_token,
    }

    env = None
    if template.env is not None:
        env = {
            key: substitute_placeholders(value, replacements) if isinstance(value, str) else value
            for key, value in template.env.items()
        }

    invocation = ToolServerInvocation(
        command=template.command,
        args=[substitute_placeholders(arg, replacements) for arg in template.args],
        env=env,
    )
    logger.debug(
        "Built tool server config",
        provider=provider_type.value,
        server=tool_server_name(provider_type),
    )
    return invocation


def substitute_placeholders(value: str, replacements: Mapping[str, str]) -> str:
    """Replace every exact ``${KEY}`` token in ``value``.

    Only the keys in ``replacements`` are touched; other ``${...}`` markers
    are left as they are.
    """
    for key, replacement in replacements.items():
        value = value.replace(f"${{{key}}}", replacement)
    return value


def tool_server_name(provider: GitProvider | str) -> str:
    """Get the MCP server name for a provider, e.g. ``gitea-mcp``."""
    return f"{parse_provider(provider).value}-mcp"
