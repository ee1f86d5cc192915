"""Git credential configuration for target repositories."""

from urllib.parse import urlsplit

import structlog

from repo_resolver.core.exceptions import MalformedBaseUrlError
from repo_resolver.core.models.repository import TargetRepository
from repo_resolver.git.provider_resolver import is_github_provider, resolve_api_base_url

logger = structlog.get_logger(__name__)

CREDENTIAL_HELPER = "store"


def credential_config(repo: TargetRepository) -> dict[str, str]:
    """Build git config entries selecting a credential helper.

    GitHub gets the global ``credential.helper``; self-hosted providers get a
    helper scoped to the API host, e.g. ``credential.git.example.com.helper``.

    Raises:
        MalformedBaseUrlError: If the provider base URL has no hostname.
    """
    if is_github_provider(repo):
        return {"credential.helper": CREDENTIAL_HELPER}

    api_base_url = resolve_api_base_url(repo)
    hostname = _extract_hostname(api_base_url)
    logger.debug("Scoped credential helper to host", hostname=hostname)
    return {f"credential.{hostname}.helper": CREDENTIAL_HELPER}


def _extract_hostname(url: str) -> str:
    try:
        hostname = urlsplit(url).hostname
    except ValueError as e:
        raise MalformedBaseUrlError(url) from e
    if not hostname:
        raise MalformedBaseUrlError(url)
    return hostname
