"""Test factories using factory_boy."""

import factory

from repo_resolver.core.models import GitProvider, ProviderConfig, TargetRepository


class ProviderConfigFactory(factory.Factory):
    """Factory for creating self-hosted ProviderConfig instances."""

    class Meta:
        model = ProviderConfig

    type = GitProvider.GITEA
    base_url = factory.Sequence(lambda n: f"https://git{n}.example.com")
    api_token = factory.Sequence(lambda n: f"token-{n}")


class TargetRepositoryFactory(factory.Factory):
    """Factory for creating TargetRepository instances on GitHub."""

    class Meta:
        model = TargetRepository

    owner = factory.Sequence(lambda n: f"owner{n}")
    repo = factory.Sequence(lambda n: f"repo{n}")
    provider = None


class SelfHostedRepositoryFactory(TargetRepositoryFactory):
    """Factory for creating TargetRepository instances on Gitea."""

    provider = factory.SubFactory(ProviderConfigFactory)
