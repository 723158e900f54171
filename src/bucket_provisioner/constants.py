"""Constants for the bucket provisioner."""

# Environment variables
ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_DEFAULT_REGION = "AWS_DEFAULT_REGION"
ENV_ACCOUNT_ID = "AWS_ACCOUNT_ID"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Local files
CUSTOM_POLICY_FILE = "custom-bucket-policy.json"
CREDENTIALS_FILE_PREFIX = ".env."

# Policy documents
POLICY_VERSION = "2012-10-17"
PUBLIC_READ_SID = "PublicReadGetObject"
DEFAULT_POLICY_ACTIONS = ["s3:PutObject", "s3:GetObject"]
PUBLIC_READ_ACTIONS = ["s3:GetObject"]

# Bucket folders
PUBLIC_PREFIX = "public/"
PRIVATE_PREFIX = "private/"

# CORS
CORS_ALLOWED_HEADERS = ["*"]
CORS_ALLOWED_METHODS = ["GET", "PUT", "DELETE"]
CORS_MAX_AGE_SECONDS = 3000

# Prompts
DEFAULT_APP_URL = "http://localhost:3000"

# Regions
US_EAST_1 = "us-east-1"

# Resource kinds used in log events
KIND_BUCKET = "Bucket"
KIND_BUCKET_CORS = "BucketCors"
KIND_BUCKET_POLICY = "BucketPolicy"
KIND_USER = "User"
KIND_IAM_POLICY = "IAMPolicy"
KIND_ACCESS_KEY = "AccessKey"

SEPARATOR = "\n-----------------------------------\n"
