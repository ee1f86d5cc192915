"""Domain models for Repo-Resolver."""

from repo_resolver.core.models.provider import GitProvider, ProviderConfig
from repo_resolver.core.models.repository import TargetRepository
from repo_resolver.core.models.tool_server import ToolServerInvocation, ToolServerTemplate

__all__ = [
    "GitProvider",
    "ProviderConfig",
    "TargetRepository",
    "ToolServerTemplate",
    "ToolServerInvocation",
]
