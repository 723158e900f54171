"""Unit tests for prompt validators."""

from __future__ import annotations

import click
import pytest

from bucket_provisioner.utils.validation import (
    validate_app_url,
    validate_bucket_name,
    validate_policy_name,
    validate_username,
)


class TestValidateBucketName:
    """Test bucket name validation."""

    @pytest.mark.parametrize("name", ["my-bucket.1", "abc", "a" * 63, "my-app-assets"])
    def test_accepts_valid_names(self, name: str) -> None:
        """Test that valid bucket names are returned unchanged."""
        assert validate_bucket_name(name) == name

    def test_rejects_too_short(self) -> None:
        """Test that names under 3 characters are rejected."""
        with pytest.raises(click.BadParameter, match="at least 3 characters"):
            validate_bucket_name("ab")

    def test_rejects_too_long(self) -> None:
        """Test that names over 63 characters are rejected."""
        with pytest.raises(click.BadParameter, match="at most 63 characters"):
            validate_bucket_name("a" * 64)

    def test_rejects_uppercase(self) -> None:
        """Test that uppercase characters are rejected."""
        with pytest.raises(click.BadParameter, match="must be lowercase"):
            validate_bucket_name("My-Bucket")

    def test_rejects_underscore(self) -> None:
        """Test that characters outside [a-z0-9.-] are rejected."""
        with pytest.raises(click.BadParameter):
            validate_bucket_name("my_bucket")

    def test_rejects_empty(self) -> None:
        """Test that an empty answer asks for a bucket name."""
        with pytest.raises(click.BadParameter, match="Please enter a bucket name"):
            validate_bucket_name("")

    def test_rejects_trailing_newline(self) -> None:
        """Test that a trailing newline does not slip past the charset check."""
        with pytest.raises(click.BadParameter):
            validate_bucket_name("my-bucket\n")


class TestValidateIamNames:
    """Test username and policy name validation."""

    @pytest.mark.parametrize("name", ["jo.doe_1", "deployer", "a+b=c,d@e-f", "A" * 63])
    def test_accepts_valid_usernames(self, name: str) -> None:
        """Test that valid usernames are accepted."""
        assert validate_username(name) == name

    def test_rejects_short_username(self) -> None:
        """Test that short usernames are rejected."""
        with pytest.raises(click.BadParameter, match="Username must be at least 3 characters"):
            validate_username("jo")

    def test_rejects_invalid_character(self) -> None:
        """Test that characters outside the IAM charset are rejected."""
        with pytest.raises(click.BadParameter, match=r"\+=,\.@_-"):
            validate_username("jo#doe")

    def test_rejects_long_username(self) -> None:
        """Test that usernames over 63 characters are rejected."""
        with pytest.raises(click.BadParameter):
            validate_username("u" * 64)

    def test_policy_name_uses_its_own_label(self) -> None:
        """Test that policy name messages mention the policy name."""
        with pytest.raises(click.BadParameter, match="Policy name must be at least 3 characters"):
            validate_policy_name("pn")

    def test_policy_name_empty(self) -> None:
        """Test that an empty policy name is rejected."""
        with pytest.raises(click.BadParameter, match="Please enter a policy name"):
            validate_policy_name("")

    def test_policy_name_accepts_valid(self) -> None:
        """Test that a valid policy name is accepted."""
        assert validate_policy_name("uploads-policy") == "uploads-policy"


class TestValidateAppUrl:
    """Test app URL validation."""

    @pytest.mark.parametrize("url", ["http://localhost:3000", "https://app.example.com", "https://x"])
    def test_accepts_http_and_https(self, url: str) -> None:
        """Test that http(s) URLs are accepted."""
        assert validate_app_url(url) == url

    @pytest.mark.parametrize("url", ["ftp://example.com", "app.example.com", "https://", "http:/x"])
    def test_rejects_other_urls(self, url: str) -> None:
        """Test that non-http(s) URLs are rejected."""
        with pytest.raises(click.BadParameter, match="App URL must be a valid URL"):
            validate_app_url(url)

    def test_rejects_empty(self) -> None:
        """Test that an empty URL is rejected."""
        with pytest.raises(click.BadParameter, match="Please enter an app URL"):
            validate_app_url("")
