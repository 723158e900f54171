"""Builder for provider instances."""

from __future__ import annotations

from ..config import ProvisionerSettings
from ..services.aws.client import AWSProvider
from ..services.s3.base import ProvisioningProvider


def create_provider(settings: ProvisionerSettings, region: str | None = None) -> ProvisioningProvider:
    """Create a provider from environment settings.

    Args:
        settings: Settings loaded from the environment
        region: Optional region override; falls back to ``AWS_DEFAULT_REGION``

    Returns:
        Configured provider instance

    Raises:
        ConfigurationError: If the access key pair is missing
    """
    access_key, secret_key = settings.require_credentials()
    return AWSProvider(
        region=settings.resolve_region(region),
        access_key=access_key,
        secret_key=secret_key,
    )
