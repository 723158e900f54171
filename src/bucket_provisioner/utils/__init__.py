"""Utility functions for the bucket provisioner."""

from .errors import sanitize_dict, sanitize_error_message, sanitize_exception
from .validation import (
    validate_app_url,
    validate_bucket_name,
    validate_iam_name,
    validate_policy_name,
    validate_username,
)

__all__ = [
    "sanitize_dict",
    "sanitize_error_message",
    "sanitize_exception",
    "validate_app_url",
    "validate_bucket_name",
    "validate_iam_name",
    "validate_policy_name",
    "validate_username",
]
