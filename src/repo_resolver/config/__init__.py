"""Configuration for Repo-Resolver."""

from repo_resolver.config.logging import configure_logging
from repo_resolver.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
