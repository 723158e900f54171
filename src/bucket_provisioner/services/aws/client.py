"""AWS S3 and IAM client implementation."""

from __future__ import annotations

import json
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ...constants import US_EAST_1
from .models import AccessKey, CorsRule, PublicAccessConfig

logger = logging.getLogger(__name__)


class AWSProvider:
    """Thin wrapper issuing one S3 or IAM control-plane call per method.

    No method retries or checks for existing resources. A ``ClientError`` is
    logged and re-raised unchanged.
    """

    def __init__(
        self,
        region: str | None,
        access_key: str,
        secret_key: str,
    ) -> None:
        """Initialize the provider.

        Args:
            region: AWS region, ``None`` lets botocore pick its default
            access_key: Access key ID
            secret_key: Secret access key
        """
        self.region = region

        config = Config(signature_version="s3v4")

        self.client = boto3.client(
            "s3",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            config=config,
        )
        self.iam_client = boto3.client(
            "iam",
            region_name=region,
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
        )

    def create_bucket(self, name: str) -> None:
        """Create a bucket in the provider's region."""
        try:
            create_params: dict[str, Any] = {"Bucket": name}
            # us-east-1 rejects an explicit location constraint
            if self.region and self.region != US_EAST_1:
                create_params["CreateBucketConfiguration"] = {"LocationConstraint": self.region}

            self.client.create_bucket(**create_params)
            logger.debug(f"Created bucket {name} in {self.region or 'default region'}")
        except ClientError as e:
            logger.error(f"Failed to create bucket {name}: {e}")
            raise

    def set_bucket_cors(self, name: str, rules: list[CorsRule]) -> None:
        """Replace the bucket CORS configuration with the given rules."""
        try:
            self.client.put_bucket_cors(
                Bucket=name,
                CORSConfiguration={"CORSRules": [rule.to_aws() for rule in rules]},
            )
        except ClientError as e:
            logger.error(f"Failed to set CORS for bucket {name}: {e}")
            raise

    def set_public_access_block(self, name: str, config: PublicAccessConfig) -> None:
        """Set the bucket public access block flags."""
        try:
            self.client.put_public_access_block(
                Bucket=name,
                PublicAccessBlockConfiguration=config.to_aws(),
            )
        except ClientError as e:
            logger.error(f"Failed to set public access block for bucket {name}: {e}")
            raise

    def set_bucket_policy(self, name: str, policy: dict[str, Any]) -> None:
        """Set the bucket policy."""
        try:
            policy_json = json.dumps(policy)
            logger.debug(f"Policy JSON for bucket {name}: {policy_json}")
            self.client.put_bucket_policy(Bucket=name, Policy=policy_json)
        except ClientError as e:
            logger.error(f"Failed to set policy for bucket {name}: {e}")
            raise

    def put_folder(self, name: str, key: str) -> None:
        """Create an empty ``key`` object acting as a folder marker."""
        try:
            self.client.put_object(Bucket=name, Key=key)
        except ClientError as e:
            logger.error(f"Failed to create folder {key} in bucket {name}: {e}")
            raise

    def create_user(self, name: str) -> dict[str, Any]:
        """Create an IAM user without policies or tags.

        Args:
            name: User name

        Returns:
            User creation response
        """
        try:
            response = self.iam_client.create_user(UserName=name)
            logger.debug(f"Created IAM user {name}")
            return response
        except ClientError as e:
            logger.error(f"Failed to create user {name}: {e}")
            raise

    def create_managed_policy(self, policy_name: str, policy_document: str) -> dict[str, Any]:
        """Create a managed IAM policy.

        Args:
            policy_name: Policy name
            policy_document: Policy document as a JSON string

        Returns:
            Policy creation response
        """
        try:
            response = self.iam_client.create_policy(
                PolicyName=policy_name,
                PolicyDocument=policy_document,
            )
            logger.debug(f"Created managed policy {policy_name}")
            return response
        except ClientError as e:
            logger.error(f"Failed to create managed policy {policy_name}: {e}")
            raise

    def attach_user_policy(self, user_name: str, policy_arn: str) -> None:
        """Attach a managed policy to a user by ARN."""
        try:
            self.iam_client.attach_user_policy(UserName=user_name, PolicyArn=policy_arn)
            logger.debug(f"Attached managed policy {policy_arn} to user {user_name}")
        except ClientError as e:
            logger.error(f"Failed to attach policy {policy_arn} to user {user_name}: {e}")
            raise

    def create_access_key(self, user_name: str) -> AccessKey:
        """Create an access key for a user.

        IAM allows two live keys per user; a third request fails with
        ``LimitExceeded``.
        """
        try:
            response = self.iam_client.create_access_key(UserName=user_name)
            return AccessKey.from_response(response)
        except ClientError as e:
            logger.error(f"Failed to create access key for user {user_name}: {e}")
            raise
