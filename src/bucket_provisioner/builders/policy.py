"""Builders for bucket CORS rules and policy documents."""

from __future__ import annotations

from typing import Any

from ..constants import (
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    CORS_MAX_AGE_SECONDS,
    DEFAULT_POLICY_ACTIONS,
    POLICY_VERSION,
    PUBLIC_PREFIX,
    PUBLIC_READ_ACTIONS,
    PUBLIC_READ_SID,
)
from ..schemas import build_policy_document
from ..services.aws.models import CorsRule


def bucket_objects_arn(bucket_name: str, prefix: str = "") -> str:
    """ARN matching every object under ``prefix`` in the bucket."""
    return f"arn:aws:s3:::{bucket_name}/{prefix}*"


def policy_arn(policy_name: str, account_id: str) -> str:
    """ARN of a customer managed policy in the given account."""
    return f"arn:aws:iam::{account_id}:policy/{policy_name}"


def default_policy_name(bucket_name: str) -> str:
    return f"default-{bucket_name}-policy"


def build_cors_rules(app_url: str) -> list[CorsRule]:
    """The single CORS rule letting the app origin read, upload and delete."""
    return [
        CorsRule(
            allowed_headers=list(CORS_ALLOWED_HEADERS),
            allowed_methods=list(CORS_ALLOWED_METHODS),
            allowed_origins=[app_url],
            expose_headers=[],
            max_age_seconds=CORS_MAX_AGE_SECONDS,
        )
    ]


def build_public_read_policy(bucket_name: str) -> dict[str, Any]:
    """Bucket policy granting anonymous reads under ``public/`` only."""
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Sid": PUBLIC_READ_SID,
                "Effect": "Allow",
                "Principal": "*",
                "Action": list(PUBLIC_READ_ACTIONS),
                "Resource": [bucket_objects_arn(bucket_name, PUBLIC_PREFIX)],
            }
        ],
    }


def build_default_user_policy(bucket_name: str) -> dict[str, Any]:
    """User policy allowing object uploads and downloads anywhere in the bucket."""
    return build_policy_document(DEFAULT_POLICY_ACTIONS, [bucket_objects_arn(bucket_name)])


def build_policy_skeleton(bucket_name: str) -> dict[str, Any]:
    """Starting point for a custom policy; ``Action`` is left for the operator."""
    return build_policy_document([], [bucket_objects_arn(bucket_name)])
