"""Registry of supported Git providers and their static defaults."""

from types import MappingProxyType

from repo_resolver.core.exceptions import UnsupportedProviderError
from repo_resolver.core.models.provider import GitProvider, ProviderConfig
from repo_resolver.core.models.tool_server import ToolServerTemplate

GITHUB_API_URL = "https://api.github.com"
GITHUB_WEB_URL = "https://github.com"
GITHUB_HOSTNAME = "github.com"

API_PATH_SUFFIX = "/api/v1"
SELF_HOSTED_DEFAULT_WEB_URL = "http://localhost:3000"
SELF_HOSTED_DEFAULT_API_URL = f"{SELF_HOSTED_DEFAULT_WEB_URL}{API_PATH_SUFFIX}"

DEFAULT_PROVIDER_CONFIGS = MappingProxyType(
    {
        GitProvider.GITHUB: ProviderConfig(type=GitProvider.GITHUB, base_url=GITHUB_API_URL),
        GitProvider.GITEA: ProviderConfig(type=GitProvider.GITEA, tool_server_name="gitea-mcp"),
        GitProvider.FORGEJO: ProviderConfig(
            type=GitProvider.FORGEJO, tool_server_name="forgejo-mcp"
        ),
    }
)

# GitHub is served through direct API calls and has no template.
TOOL_SERVER_TEMPLATES = MappingProxyType(
    {
        GitProvider.GITEA: ToolServerTemplate(
            command="npx",
            args=(
                "-y",
                "gitea-mcp-server",
                "--url",
                "${GITEA_BASE_URL}",
                "--token",
                "${GITEA_TOKEN}",
            ),
            env={
                "GITEA_HOST": "${GITEA_BASE_URL}",
                "GITEA_ACCESS_TOKEN": "${GITEA_TOKEN}",
            },
        ),
        GitProvider.FORGEJO: ToolServerTemplate(
            command="npx",
            args=(
                "-y",
                "forgejo-mcp-server",
                "--url",
                "${FORGEJO_BASE_URL}",
                "--token",
                "${FORGEJO_TOKEN}",
            ),
            env={
                "FORGEJO_URL": "${FORGEJO_BASE_URL}",
                "FORGEJO_TOKEN": "${FORGEJO_TOKEN}",
            },
        ),
    }
)


def parse_provider(value: GitProvider | str) -> GitProvider:
    """Convert a raw provider name into a ``GitProvider``.

    Raises:
        UnsupportedProviderError: If the name is not a supported provider.
    """
    if isinstance(value, GitProvider):
        return value
    try:
        return GitProvider(value)
    except ValueError:
        raise UnsupportedProviderError(value) from None


def get_default_provider_config(provider: GitProvider | str) -> ProviderConfig:
    """Get the built-in configuration for a provider."""
    return DEFAULT_PROVIDER_CONFIGS[parse_provider(provider)]


def get_tool_server_template(provider: GitProvider | str) -> ToolServerTemplate:
    """Get the tool-server launch template for a self-hosted provider.

    Raises:
        UnsupportedProviderError: If the provider has no tool-server template.
    """
    provider_type = parse_provider(provider)
    try:
        return TOOL_SERVER_TEMPLATES[provider_type]
    except KeyError:
        raise UnsupportedProviderError(provider_type.value) from None
