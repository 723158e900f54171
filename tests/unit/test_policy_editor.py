"""Tests for the custom policy editor."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from bucket_provisioner.policy_editor import (
    INVALID_JSON_MESSAGE,
    edit_policy_document,
    load_policy_document,
    write_policy_skeleton,
)
from bucket_provisioner.schemas import PolicyDocumentError

VALID_POLICY = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Sid": "Uploads",
            "Effect": "Allow",
            "Action": ["s3:PutObject"],
            "Resource": ["arn:aws:s3:::my-bucket/uploads/*"],
        }
    ],
}


class TestPolicyFile:
    """Test writing and loading the policy file."""

    def test_skeleton_written_with_indent(self, tmp_path: Path) -> None:
        """Test the skeleton content and formatting."""
        path = write_policy_skeleton("my-bucket", tmp_path / "custom-bucket-policy.json")

        text = path.read_text()
        assert '\n    "Version": "2012-10-17"' in text
        assert json.loads(text)["Statement"][0] == {
            "Effect": "Allow",
            "Action": [],
            "Resource": ["arn:aws:s3:::my-bucket/*"],
        }

    def test_skeleton_fails_validation(self, tmp_path: Path) -> None:
        """Test that the untouched skeleton is rejected for its empty Action."""
        path = write_policy_skeleton("my-bucket", tmp_path / "policy.json")

        with pytest.raises(PolicyDocumentError, match="Policy must have at least one action"):
            load_policy_document(path)

    def test_load_valid_document_keeps_extra_keys(self, tmp_path: Path) -> None:
        """Test that the document is returned as written."""
        path = tmp_path / "policy.json"
        path.write_text(json.dumps(VALID_POLICY))

        assert load_policy_document(path) == VALID_POLICY

    def test_invalid_json_reports_generic_message(self, tmp_path: Path) -> None:
        """Test that parse failures use one generic message."""
        path = tmp_path / "policy.json"
        path.write_text('{"Version": "2012-10-17",')

        with pytest.raises(PolicyDocumentError) as exc_info:
            load_policy_document(path)
        assert str(exc_info.value) == INVALID_JSON_MESSAGE

    def test_missing_file_reports_generic_message(self, tmp_path: Path) -> None:
        """Test that a deleted file is reported like invalid JSON."""
        with pytest.raises(PolicyDocumentError, match=INVALID_JSON_MESSAGE):
            load_policy_document(tmp_path / "missing.json")


class TestEditPolicyDocument:
    """Test the interactive edit loop."""

    def _run(self, path: Path, user_input: str) -> tuple[object, list]:
        captured: list = []

        @click.command()
        def command() -> None:
            captured.append(edit_policy_document(path, editor="vi"))

        result = CliRunner().invoke(command, input=user_input)
        return result, captured

    def test_opens_editor_and_returns_document(self, tmp_path: Path) -> None:
        """Test that the editor is opened and the valid document returned."""
        path = tmp_path / "policy.json"
        write_policy_skeleton("my-bucket", path)

        def fake_edit(filename: str, editor: str | None = None) -> None:
            Path(filename).write_text(json.dumps(VALID_POLICY))

        with patch("bucket_provisioner.policy_editor.click.edit", side_effect=fake_edit) as edit:
            result, captured = self._run(path, "\n\n")

        assert result.exit_code == 0, result.output
        edit.assert_called_once_with(filename=str(path), editor="vi")
        assert captured == [VALID_POLICY]

    def test_reprompts_until_valid(self, tmp_path: Path) -> None:
        """Test that schema errors are shown and the prompt repeats."""
        path = tmp_path / "policy.json"

        with patch("bucket_provisioner.policy_editor.click.edit"), patch(
            "bucket_provisioner.policy_editor.load_policy_document",
            side_effect=[
                PolicyDocumentError("Statement.0.Action: Policy must have at least one action"),
                PolicyDocumentError(INVALID_JSON_MESSAGE),
                VALID_POLICY,
            ],
        ) as load:
            result, captured = self._run(path, "\n\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Error: Statement.0.Action: Policy must have at least one action" in result.output
        assert f"Error: {INVALID_JSON_MESSAGE}" in result.output
        assert load.call_count == 3
        assert captured == [VALID_POLICY]
