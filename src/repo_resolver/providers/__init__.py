"""Provider registry for Repo-Resolver."""

from repo_resolver.providers.registry import (
    DEFAULT_PROVIDER_CONFIGS,
    TOOL_SERVER_TEMPLATES,
    get_default_provider_config,
    get_tool_server_template,
    parse_provider,
)

__all__ = [
    "DEFAULT_PROVIDER_CONFIGS",
    "TOOL_SERVER_TEMPLATES",
    "get_default_provider_config",
    "get_tool_server_template",
    "parse_provider",
]
