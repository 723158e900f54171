"""Provider interface used by the provisioning functions."""

from __future__ import annotations

from typing import Any, Protocol

from ..aws.models import AccessKey, CorsRule, PublicAccessConfig


class ProvisioningProvider(Protocol):
    """Protocol defining the control-plane calls the provisioner makes."""

    region: str | None

    def create_bucket(self, name: str) -> None:
        """Create a bucket."""
        ...

    def set_bucket_cors(self, name: str, rules: list[CorsRule]) -> None:
        """Replace the bucket CORS configuration."""
        ...

    def set_public_access_block(self, name: str, config: PublicAccessConfig) -> None:
        """Set the bucket public access block flags."""
        ...

    def set_bucket_policy(self, name: str, policy: dict[str, Any]) -> None:
        """Set bucket policy."""
        ...

    def put_folder(self, name: str, key: str) -> None:
        """Create an empty folder marker object."""
        ...

    def create_user(self, name: str) -> dict[str, Any]:
        """Create an IAM user."""
        ...

    def create_managed_policy(self, policy_name: str, policy_document: str) -> dict[str, Any]:
        """Create a managed IAM policy."""
        ...

    def attach_user_policy(self, user_name: str, policy_arn: str) -> None:
        """Attach a managed policy to a user."""
        ...

    def create_access_key(self, user_name: str) -> AccessKey:
        """Create an access key for a user."""
        ...
