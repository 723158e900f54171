"""Error sanitization so provisioning failures never leak credentials into logs."""

import re
from typing import Any


# Values that identify the operator's account or credentials
SENSITIVE_PATTERNS = [
    (r"\b(AKIA|ASIA)[A-Z0-9]{16}\b", "[REDACTED]"),
    (r"arn:aws:iam::\d{12}:", "arn:aws:iam::[REDACTED]:"),
    (r"secret[_\s]?access[_\s]?key[=:\s]+[A-Za-z0-9/+=]{40}", "secret_access_key: [REDACTED]"),
    (r"session[_\s]?token[=:\s]+[A-Za-z0-9/+=]+", "session_token: [REDACTED]"),
]

# Keys whose values are redacted completely
SENSITIVE_FIELDS = {
    "access_key_id",
    "secret_access_key",
    "session_token",
    "password",
    "secret",
    "credentials",
}


def sanitize_error_message(message: str) -> str:
    """Sanitize an error message.

    Args:
        message: Original error message

    Returns:
        Message with access key ids, secrets and account ids redacted
    """
    sanitized = message
    for pattern, replacement in SENSITIVE_PATTERNS:
        sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)
    return sanitized


def sanitize_exception(error: Exception) -> str:
    """Sanitize an exception's message."""
    return sanitize_error_message(str(error))


def sanitize_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """Sanitize a dictionary by redacting sensitive fields.

    Args:
        data: Dictionary to sanitize
        sensitive_keys: Additional keys to redact (merged with SENSITIVE_FIELDS)

    Returns:
        Copy of the dictionary with sensitive values redacted
    """
    all_sensitive = SENSITIVE_FIELDS | (sensitive_keys or set())
    sanitized: dict[str, Any] = {}

    for key, value in data.items():
        if key.lower() in all_sensitive:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = sanitize_dict(value, sensitive_keys)
        elif isinstance(value, str):
            sanitized[key] = sanitize_error_message(value)
        else:
            sanitized[key] = value

    return sanitized
