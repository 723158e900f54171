"""Writes the produced access key to a dotenv file named after the bucket."""

from __future__ import annotations

import logging
from pathlib import Path

from .constants import CREDENTIALS_FILE_PREFIX
from .services.aws.models import AccessKey

logger = logging.getLogger(__name__)


def credentials_path(bucket_name: str, directory: Path | str = ".") -> Path:
    return Path(directory) / f"{CREDENTIALS_FILE_PREFIX}{bucket_name}"


def render_credentials(access_key: AccessKey, bucket_name: str, region: str | None) -> str:
    """Render the four ``KEY=value`` lines of the credentials file."""
    lines = [
        f"AWS_ACCESS_KEY_ID={access_key.access_key_id}",
        f"AWS_SECRET_ACCESS_KEY={access_key.secret_access_key}",
        f"AWS_BUCKET_NAME={bucket_name}",
        f"AWS_REGION={region or ''}",
    ]
    return "\n".join(lines) + "\n"


def write_credentials_file(
    access_key: AccessKey,
    bucket_name: str,
    region: str | None,
    directory: Path | str = ".",
) -> Path:
    """Write ``.env.<bucket>``, replacing any existing file without warning."""
    path = credentials_path(bucket_name, directory)
    path.write_text(render_credentials(access_key, bucket_name, region), encoding="utf-8")
    logger.debug(f"Wrote credentials for user {access_key.user_name} to {path}")
    return path
