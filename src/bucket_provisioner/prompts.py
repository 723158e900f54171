"""Interactive question sets.

Each text answer is validated as soon as it is entered; click repeats the
question with the validator's message until the answer is accepted.
"""

from __future__ import annotations

import click

from .config import ProvisionerSettings
from .constants import DEFAULT_APP_URL
from .services.aws.models import BucketSelection, PolicySelection
from .utils.validation import (
    validate_app_url,
    validate_bucket_name,
    validate_policy_name,
    validate_username,
)


def collect_bucket_selection(settings: ProvisionerSettings) -> BucketSelection:
    """Ask for the bucket, user, app URL, public access, region and policy choice."""
    bucket_name = click.prompt("Enter a unique bucket name", value_proc=validate_bucket_name)
    username = click.prompt("Enter the username", value_proc=validate_username)
    app_url = click.prompt("Enter the app URL", default=DEFAULT_APP_URL, value_proc=validate_app_url)
    allow_public_read = click.confirm(
        "Would you like to allow public read access? (Public will create 2 folders: public/ and private/)",
        default=True,
    )
    region = click.prompt(
        "Enter the region",
        default=settings.default_region or "",
        show_default=bool(settings.default_region),
    )
    default_policy = click.confirm(
        "Would you like to use the default bucket policy? (PutObject, GetObject)",
        default=True,
    )

    return BucketSelection(
        bucket_name=bucket_name,
        username=username,
        app_url=app_url,
        allow_public_read=allow_public_read,
        region=region.strip() or None,
        default_policy=default_policy,
    )


def collect_policy_name() -> PolicySelection:
    """Ask for the name of the custom managed policy."""
    policy_name = click.prompt("Enter a unique policy name", value_proc=validate_policy_name)
    return PolicySelection(policy_name=policy_name)
