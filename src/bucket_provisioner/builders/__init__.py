"""Builders for providers and policy documents."""

from .policy import (
    build_cors_rules,
    build_default_user_policy,
    build_policy_skeleton,
    build_public_read_policy,
    default_policy_name,
    policy_arn,
)
from .provider import create_provider

__all__ = [
    "build_cors_rules",
    "build_default_user_policy",
    "build_policy_skeleton",
    "build_public_read_policy",
    "create_provider",
    "default_policy_name",
    "policy_arn",
]
