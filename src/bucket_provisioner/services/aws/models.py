"""Records passed between provisioning steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class BucketSelection:
    """Answers collected by the primary prompt."""

    bucket_name: str
    username: str
    app_url: str
    allow_public_read: bool
    region: str | None
    default_policy: bool


@dataclass(frozen=True)
class PolicySelection:
    """Name chosen for a custom managed policy."""

    policy_name: str


@dataclass(frozen=True)
class CorsRule:
    """A single bucket CORS rule."""

    allowed_origins: list[str]
    allowed_methods: list[str]
    allowed_headers: list[str] = field(default_factory=list)
    expose_headers: list[str] = field(default_factory=list)
    max_age_seconds: int | None = None

    def to_aws(self) -> dict[str, Any]:
        """Convert to the shape expected by ``put_bucket_cors``."""
        rule: dict[str, Any] = {
            "AllowedHeaders": list(self.allowed_headers),
            "AllowedMethods": list(self.allowed_methods),
            "AllowedOrigins": list(self.allowed_origins),
            "ExposeHeaders": list(self.expose_headers),
        }
        if self.max_age_seconds is not None:
            rule["MaxAgeSeconds"] = self.max_age_seconds
        return rule


@dataclass(frozen=True)
class PublicAccessConfig:
    """Configuration for public access blocking."""

    block_public_acls: bool = True
    block_public_policy: bool = True
    ignore_public_acls: bool = True
    restrict_public_buckets: bool = True

    def to_aws(self) -> dict[str, bool]:
        return {
            "BlockPublicAcls": self.block_public_acls,
            "IgnorePublicAcls": self.ignore_public_acls,
            "BlockPublicPolicy": self.block_public_policy,
            "RestrictPublicBuckets": self.restrict_public_buckets,
        }


@dataclass(frozen=True)
class AccessKey:
    """A programmatic access key, returned once by IAM."""

    access_key_id: str
    secret_access_key: str
    user_name: str

    @classmethod
    def from_response(cls, response: dict[str, Any]) -> AccessKey:
        """Build from a ``create_access_key`` response."""
        key = response["AccessKey"]
        return cls(
            access_key_id=key["AccessKeyId"],
            secret_access_key=key["SecretAccessKey"],
            user_name=key["UserName"],
        )
