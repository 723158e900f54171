"""Interactive S3 bucket and IAM user provisioner."""

__version__ = "0.1.0"
