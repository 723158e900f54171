"""Main entry point for the bucket provisioner."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from dotenv import load_dotenv

from . import logging as structured_logging
from . import provisioner
from .builders.policy import build_cors_rules, policy_arn
from .config import ProvisionerSettings, load_settings
from .constants import CUSTOM_POLICY_FILE, SEPARATOR
from .credentials import write_credentials_file
from .policy_editor import edit_policy_document, load_policy_document, write_policy_skeleton
from .prompts import collect_bucket_selection, collect_policy_name

logger = logging.getLogger(__name__)


def run(settings: ProvisionerSettings, workdir: Path | None = None, editor: str | None = None) -> Path:
    """Collect answers, provision every resource in order and write the credentials file.

    Any provisioning error propagates; resources created before it are left in place.

    Returns:
        Path of the written credentials file
    """
    workdir = workdir or Path.cwd()
    selection = collect_bucket_selection(settings)
    bucket_name = selection.bucket_name
    region = selection.region
    policy_file = workdir / CUSTOM_POLICY_FILE

    policy_name: str | None = None
    if not selection.default_policy:
        name = collect_policy_name().policy_name
        write_policy_skeleton(bucket_name, policy_file)
        edit_policy_document(policy_file, editor=editor)
        policy_name = name

    logger.info("Creating S3 bucket...")
    provisioner.create_s3_bucket(bucket_name, region=region, settings=settings)
    logger.info(f"Bucket {bucket_name} created!")

    logger.info(SEPARATOR)

    logger.info("Attaching CORS policy to bucket...")
    provisioner.attach_bucket_cors(bucket_name, build_cors_rules(selection.app_url), region=region, settings=settings)
    logger.info("CORS policy attached!")

    logger.info(SEPARATOR)

    if selection.allow_public_read:
        logger.info("Creating public bucket policy...")
        provisioner.attach_public_bucket_policy(bucket_name, region=region, settings=settings)
        provisioner.create_bucket_folders(bucket_name, region=region, settings=settings)
        logger.info("Public bucket policy created!")

    logger.info(SEPARATOR)

    logger.info("Creating IAM user...")
    provisioner.create_user(selection.username, region=region, settings=settings)
    logger.info("IAM user created!")

    if selection.default_policy:
        logger.info("Attaching default policy to user...")
        arn = provisioner.create_default_user_policy(bucket_name, region=region, settings=settings)
        provisioner.attach_user_policy(selection.username, arn, region=region, settings=settings)
        logger.info("Default policy attached!")
    else:
        logger.info("Creating custom policy...")
        if not policy_name:
            raise ValueError("Policy name not found")

        account_id = settings.require_account_id()
        document = load_policy_document(policy_file)
        compact = json.dumps(document, separators=(",", ":"))
        provisioner.create_policy(policy_name, compact, region=region, settings=settings)
        provisioner.attach_user_policy(
            selection.username, policy_arn(policy_name, account_id), region=region, settings=settings
        )
        logger.info("Custom policy attached!")

    logger.info(SEPARATOR)

    logger.info("Creating access key...")
    access_key = provisioner.create_access_key(selection.username, region=region, settings=settings)
    logger.info("Access key created!")

    logger.info(SEPARATOR)

    logger.info("Creating .env file...")
    path = write_credentials_file(access_key, bucket_name, settings.resolve_region(region), directory=workdir)
    logger.info("All done!")
    return path


@click.command()
def main() -> None:
    """Provision an S3 bucket, an IAM user with a policy and an access key."""
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    settings = load_settings()
    structured_logging.setup_structured_logging(settings.log_level)
    run(settings)


if __name__ == "__main__":
    main()
