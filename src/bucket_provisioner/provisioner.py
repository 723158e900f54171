"""One function per AWS control-plane operation.

Every function builds a fresh provider from environment settings, accepts an
optional region override and lets any ``ClientError`` propagate. None of them
retries or checks whether the resource already exists.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from botocore.exceptions import ClientError

from .builders.policy import (
    build_default_user_policy,
    build_public_read_policy,
    default_policy_name,
    policy_arn,
)
from .builders.provider import create_provider
from .config import ProvisionerSettings, load_settings
from .constants import (
    KIND_ACCESS_KEY,
    KIND_BUCKET,
    KIND_BUCKET_CORS,
    KIND_BUCKET_POLICY,
    KIND_IAM_POLICY,
    KIND_USER,
    PRIVATE_PREFIX,
    PUBLIC_PREFIX,
)
from .logging import log_provisioning_event
from .services.aws.models import AccessKey, CorsRule, PublicAccessConfig
from .utils.errors import sanitize_exception

logger = logging.getLogger(__name__)


def _settings(settings: ProvisionerSettings | None) -> ProvisionerSettings:
    return settings if settings is not None else load_settings()


@contextmanager
def _reported(resource_kind: str, resource_name: str, region: str | None) -> Iterator[None]:
    """Emit a sanitized ``failed`` event for a ``ClientError`` and re-raise it."""
    try:
        yield
    except ClientError as e:
        log_provisioning_event(
            logger, resource_kind, resource_name, region, "failed", sanitize_exception(e),
            level=logging.ERROR,
            error_code=e.response.get("Error", {}).get("Code"),
        )
        raise


def create_s3_bucket(
    bucket_name: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> None:
    """Create an S3 bucket."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_BUCKET, bucket_name, provider.region):
        provider.create_bucket(bucket_name)
    log_provisioning_event(logger, KIND_BUCKET, bucket_name, provider.region, "created", "Bucket created")


def attach_bucket_cors(
    bucket_name: str,
    cors_rules: list[CorsRule],
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> None:
    """Replace the bucket CORS configuration with ``cors_rules``."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_BUCKET_CORS, bucket_name, provider.region):
        provider.set_bucket_cors(bucket_name, cors_rules)
    log_provisioning_event(
        logger, KIND_BUCKET_CORS, bucket_name, provider.region, "applied", "CORS configuration applied",
        rules=len(cors_rules),
    )


def attach_public_bucket_policy(
    bucket_name: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> None:
    """Lift the public access block and allow anonymous reads under ``public/``."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_BUCKET_POLICY, bucket_name, provider.region):
        provider.set_public_access_block(
            bucket_name,
            PublicAccessConfig(
                block_public_acls=False,
                block_public_policy=False,
                ignore_public_acls=False,
                restrict_public_buckets=False,
            ),
        )
        provider.set_bucket_policy(bucket_name, build_public_read_policy(bucket_name))
    log_provisioning_event(
        logger, KIND_BUCKET_POLICY, bucket_name, provider.region, "applied", "Public read policy applied"
    )


def create_bucket_folders(
    bucket_name: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> None:
    """Create the ``public/`` and ``private/`` folder markers."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_BUCKET, bucket_name, provider.region):
        for prefix in (PUBLIC_PREFIX, PRIVATE_PREFIX):
            provider.put_folder(bucket_name, prefix)
    log_provisioning_event(
        logger, KIND_BUCKET, bucket_name, provider.region, "folders_created", "Bucket folders created",
        folders=[PUBLIC_PREFIX, PRIVATE_PREFIX],
    )


def create_user(
    username: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> dict[str, Any]:
    """Create an IAM user with no policies or tags."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_USER, username, provider.region):
        response = provider.create_user(username)
    log_provisioning_event(logger, KIND_USER, username, provider.region, "created", "IAM user created")
    return response


def create_policy(
    policy_name: str,
    policy_document: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> str | None:
    """Register a managed policy from a JSON document string.

    Returns:
        The ARN reported by IAM, if any
    """
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_IAM_POLICY, policy_name, provider.region):
        response = provider.create_managed_policy(policy_name, policy_document)
    arn = response.get("Policy", {}).get("Arn")
    log_provisioning_event(
        logger, KIND_IAM_POLICY, policy_name, provider.region, "created", "Managed policy created", policy_arn=arn
    )
    return arn


def attach_user_policy(
    username: str,
    policy_arn: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> None:
    """Attach an existing managed policy to a user."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_IAM_POLICY, username, provider.region):
        provider.attach_user_policy(username, policy_arn)
    log_provisioning_event(
        logger, KIND_IAM_POLICY, username, provider.region, "attached", "Managed policy attached", policy_arn=policy_arn
    )


def create_access_key(
    username: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> AccessKey:
    """Create one programmatic access key for the user."""
    provider = create_provider(_settings(settings), region)
    with _reported(KIND_ACCESS_KEY, username, provider.region):
        access_key = provider.create_access_key(username)
    log_provisioning_event(
        logger, KIND_ACCESS_KEY, username, provider.region, "created", "Access key created",
        access_key_id=access_key.access_key_id,
    )
    return access_key


def create_default_user_policy(
    bucket_name: str,
    region: str | None = None,
    settings: ProvisionerSettings | None = None,
) -> str:
    """Register ``default-<bucket>-policy`` and return its ARN.

    The ARN is built from ``AWS_ACCOUNT_ID`` rather than taken from the IAM
    response.
    """
    settings = _settings(settings)
    account_id = settings.require_account_id()
    name = default_policy_name(bucket_name)

    create_policy(name, json.dumps(build_default_user_policy(bucket_name)), region=region, settings=settings)
    logger.info("Policy created")

    return policy_arn(name, account_id)
