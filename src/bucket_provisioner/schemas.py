"""Schema for operator-authored IAM policy documents."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from .constants import POLICY_VERSION


class PolicyDocumentError(ValueError):
    """Raised when a policy document cannot be parsed or fails the schema."""


class PolicyStatement(BaseModel):
    """One statement of a policy document."""

    model_config = ConfigDict(extra="allow")

    Effect: str
    Action: list[str]
    Resource: list[str]

    @field_validator("Action")
    @classmethod
    def _require_action(cls, value: list[str]) -> list[str]:
        if not value:
            raise PydanticCustomError("empty_action", "Policy must have at least one action")
        return value

    @field_validator("Resource")
    @classmethod
    def _require_resource(cls, value: list[str]) -> list[str]:
        if not value:
            raise PydanticCustomError("empty_resource", "Policy must have at least one resource")
        return value


class PolicyDocument(BaseModel):
    """An IAM policy document restricted to the fields this tool understands."""

    model_config = ConfigDict(extra="allow")

    Version: Literal["2012-10-17"]
    Statement: list[PolicyStatement]

    @field_validator("Statement")
    @classmethod
    def _require_statement(cls, value: list[PolicyStatement]) -> list[PolicyStatement]:
        if not value:
            raise PydanticCustomError("empty_statement", "Policy must have at least one statement")
        return value


def format_validation_errors(error: ValidationError) -> str:
    """Join every schema violation into one comma-separated message."""
    messages = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        messages.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return ", ".join(messages)


def validate_policy_document(data: Any) -> PolicyDocument:
    """Validate parsed JSON against the policy document schema.

    Raises:
        PolicyDocumentError: With every violation message joined by ``", "``
    """
    try:
        return PolicyDocument.model_validate(data)
    except ValidationError as e:
        raise PolicyDocumentError(format_validation_errors(e)) from e


def build_policy_document(actions: list[str], resources: list[str], effect: str = "Allow") -> dict[str, Any]:
    """Build a single-statement policy document."""
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Effect": effect,
                "Action": list(actions),
                "Resource": list(resources),
            }
        ],
    }
