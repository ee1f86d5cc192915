"""Exceptions raised while resolving target repositories."""


class RepoResolverError(Exception):
    """Base exception for Repo-Resolver."""


class UnsupportedProviderError(RepoResolverError):
    """Raised for a provider type outside the supported set."""

    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unsupported Git provider: {provider}")


class MissingCredentialsError(RepoResolverError):
    """Raised when a self-hosted tool server lacks its base URL or API token."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Base URL and API token are required for {provider} provider")


class MalformedBaseUrlError(RepoResolverError):
    """Raised when no hostname can be extracted from a provider base URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Cannot extract hostname from base URL: {url!r}")


class MissingRepositoryNameError(RepoResolverError):
    """Raised when a local path is requested for a reference without a repo name."""

    def __init__(self) -> None:
        super().__init__("No repository name provided")
