"""Environment-sourced configuration for the bucket provisioner."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .constants import (
    ENV_ACCESS_KEY_ID,
    ENV_ACCOUNT_ID,
    ENV_DEFAULT_REGION,
    ENV_LOG_LEVEL,
    ENV_SECRET_ACCESS_KEY,
)


class ConfigurationError(ValueError):
    """Raised when a required environment setting is missing."""


@dataclass(frozen=True)
class ProvisionerSettings:
    """Settings read once from the environment and never mutated."""

    access_key_id: str | None = None
    secret_access_key: str | None = None
    default_region: str | None = None
    account_id: str | None = None
    log_level: str = "INFO"

    def resolve_region(self, region: str | None = None) -> str | None:
        """Return the region override, falling back to the default region."""
        return region or self.default_region

    def require_credentials(self) -> tuple[str, str]:
        """Return the access key pair used for every AWS call.

        Raises:
            ConfigurationError: If either half of the pair is missing
        """
        if not self.access_key_id or not self.secret_access_key:
            raise ConfigurationError(f"{ENV_ACCESS_KEY_ID} and {ENV_SECRET_ACCESS_KEY} are required")
        return self.access_key_id, self.secret_access_key

    def require_account_id(self) -> str:
        """Return the account id used to build managed policy ARNs."""
        if not self.account_id:
            raise ConfigurationError(f"{ENV_ACCOUNT_ID} is required to build policy ARNs")
        return self.account_id


def load_settings() -> ProvisionerSettings:
    """Read settings from environment variables."""
    return ProvisionerSettings(
        access_key_id=os.getenv(ENV_ACCESS_KEY_ID) or None,
        secret_access_key=os.getenv(ENV_SECRET_ACCESS_KEY) or None,
        default_region=os.getenv(ENV_DEFAULT_REGION) or None,
        account_id=os.getenv(ENV_ACCOUNT_ID) or None,
        log_level=os.getenv(ENV_LOG_LEVEL, "INFO"),
    )
