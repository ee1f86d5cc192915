"""Repo-Resolver: provider-aware URLs, credentials and tool servers for target repositories."""

__version__ = "0.1.0"
