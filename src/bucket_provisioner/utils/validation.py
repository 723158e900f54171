"""Validators for prompt input.

Each validator returns the accepted value or raises ``click.BadParameter``
carrying the message shown to the operator before the prompt repeats.
"""

from __future__ import annotations

import re

import click

BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9.-]+$")
IAM_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9+=,.@_-]+$")
APP_URL_PATTERN = re.compile(r"^https?://.+$")

MIN_NAME_LENGTH = 3
MAX_NAME_LENGTH = 63


def _check_length(value: str, label: str) -> None:
    if len(value) < MIN_NAME_LENGTH:
        raise click.BadParameter(f"{label} must be at least {MIN_NAME_LENGTH} characters long")
    if len(value) > MAX_NAME_LENGTH:
        raise click.BadParameter(f"{label} must be at most {MAX_NAME_LENGTH} characters long")


def validate_bucket_name(value: str | None) -> str:
    """Validate an S3 bucket name."""
    if not value:
        raise click.BadParameter("Please enter a bucket name")
    _check_length(value, "Bucket name")
    if not BUCKET_NAME_PATTERN.fullmatch(value):
        raise click.BadParameter(
            "Bucket name must be lowercase and contain only letters, numbers, periods, and hyphens"
        )
    return value


def validate_iam_name(value: str | None, label: str) -> str:
    """Validate an IAM user or policy name.

    Args:
        value: Entered name
        label: Human readable field name used in messages, e.g. ``"Username"``

    Returns:
        The accepted name
    """
    if not value:
        raise click.BadParameter(f"Please enter a {label.lower()}")
    _check_length(value, label)
    if not IAM_NAME_PATTERN.fullmatch(value):
        raise click.BadParameter(
            f"{label} must contain only letters, numbers, and the following characters: +=,.@_-"
        )
    return value


def validate_username(value: str | None) -> str:
    """Validate an IAM user name."""
    return validate_iam_name(value, "Username")


def validate_policy_name(value: str | None) -> str:
    """Validate an IAM managed policy name."""
    return validate_iam_name(value, "Policy name")


def validate_app_url(value: str | None) -> str:
    """Validate the application URL allowed as CORS origin."""
    if not value:
        raise click.BadParameter("Please enter an app URL")
    if not APP_URL_PATTERN.fullmatch(value):
        raise click.BadParameter("App URL must be a valid URL")
    return value
