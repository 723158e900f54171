"""Operator-edited custom policy documents."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from .builders.policy import build_policy_skeleton
from .schemas import PolicyDocumentError, validate_policy_document

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Please enter a valid JSON object"


def write_policy_skeleton(bucket_name: str, path: Path) -> Path:
    """Write the starting policy document for the operator to fill in."""
    path.write_text(json.dumps(build_policy_skeleton(bucket_name), indent=4), encoding="utf-8")
    logger.debug(f"Wrote policy skeleton to {path}")
    return path


def load_policy_document(path: Path) -> dict[str, Any]:
    """Read and validate the policy file.

    Returns:
        The parsed document exactly as written, extra keys included

    Raises:
        PolicyDocumentError: If the file is missing, is not JSON, or fails the schema
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise PolicyDocumentError(INVALID_JSON_MESSAGE) from e

    validate_policy_document(data)
    return data


def edit_policy_document(path: Path, editor: str | None = None) -> dict[str, Any]:
    """Let the operator edit ``path`` and block until it holds a valid policy.

    Args:
        path: Policy file written by :func:`write_policy_skeleton`
        editor: Editor command; click falls back to ``$VISUAL`` / ``$EDITOR``

    Returns:
        The validated policy document
    """
    click.prompt(
        "A JSON file has been created for you to edit, press enter to open it",
        default="",
        show_default=False,
    )
    click.edit(filename=str(path), editor=editor)

    def _check(_: str) -> dict[str, Any]:
        try:
            return load_policy_document(path)
        except PolicyDocumentError as e:
            raise click.BadParameter(str(e)) from e

    return click.prompt(
        "When you are done editing the file, press enter to continue",
        default="",
        show_default=False,
        value_proc=_check,
    )
