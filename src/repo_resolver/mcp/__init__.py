"""MCP tool-server integration for Repo-Resolver."""

from repo_resolver.mcp.tool_server import (
    build_tool_server_config,
    substitute_placeholders,
    tool_server_name,
)

__all__ = ["build_tool_server_config", "substitute_placeholders", "tool_server_name"]
