"""Common application exceptions.

Structural problems in a workflow are never raised: the validator reports
them as findings. The exceptions here cover lookups that can miss and the
import boundary, which converts WorkflowImportError into a result value.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base application exception."""


class WorkflowImportError(AppError):
    """Raised when a workflow document cannot be parsed.

    Attributes:
        reason: Human-readable reason for the failure.
        details: Optional structured error details (e.g. Pydantic errors).
    """

    def __init__(self, reason: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(f"Invalid workflow document: {reason}")
        self.reason = reason
        self.details = details or []


class AutomationNotFoundError(AppError):
    """Raised when an automation action id is not in the catalog."""

    def __init__(self, action_id: str) -> None:
        super().__init__(f"Automation action '{action_id}' not found")
        self.action_id = action_id


class TemplateNotFoundError(AppError):
    """Raised when a workflow template id is unknown."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Workflow template '{template_id}' not found")
        self.template_id = template_id


__all__ = [
    "AppError",
    "AutomationNotFoundError",
    "TemplateNotFoundError",
    "WorkflowImportError",
]
