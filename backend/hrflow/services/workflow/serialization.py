"""Workflow document export and import.

The wire document is the JSON shape exchanged with the designer:
top-level ``id, name, description, nodes, edges, createdAt, updatedAt``;
nodes carry ``id, type, position, data`` and edges
``id, source, target, sourceHandle, targetHandle``.

Import never raises for malformed input. parse_workflow_document raises
WorkflowImportError internally and import_workflow turns that into an
ImportResult.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from hrflow.core.exceptions import WorkflowImportError
from hrflow.core.logging import get_logger
from hrflow.schemas.workflow import ImportResult, Workflow

logger = get_logger(__name__)

IMPORTED_WORKFLOW_NAME = "Imported Workflow"


def export_workflow(
    workflow: Workflow,
    clock: Callable[[], datetime] | None = None,
) -> str:
    """Serialize a workflow to its JSON wire document.

    The document keeps the workflow id and creation time; ``updatedAt`` is
    stamped with the export time. The input workflow is not modified.

    Args:
        workflow: Workflow to export.
        clock: Returns the export time. Defaults to the current UTC time.

    Returns:
        Pretty-printed JSON document.
    """
    now = clock() if clock is not None else datetime.now(UTC)
    document = workflow.model_copy(update={"updated_at": now})
    return document.model_dump_json(by_alias=True, indent=2)


def export_filename(workflow: Workflow) -> str:
    """Download name for an exported document, e.g. ``leave-approval-workflow.json``."""
    slug = re.sub(r"\s+", "-", workflow.name).lower()
    slug = re.sub(r"[^\w.-]", "", slug, flags=re.ASCII)
    return f"{slug}-workflow.json"


def parse_workflow_document(text: str | bytes) -> Workflow:
    """Parse a JSON wire document into a Workflow.

    Missing ``name``/``description`` fall back to defaults; a missing id
    or timestamps are generated.

    Raises:
        WorkflowImportError: If the text is not JSON, is not an object,
            lacks ``nodes``/``edges``, or fails schema validation.
    """
    try:
        payload: Any = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are ValueErrors; deep nesting
        # exhausts the decoder's recursion limit
        raise WorkflowImportError("document is not valid JSON") from e

    if not isinstance(payload, dict):
        raise WorkflowImportError("document must be a JSON object")
    if payload.get("nodes") is None or payload.get("edges") is None:
        raise WorkflowImportError("document must contain 'nodes' and 'edges'")

    payload = dict(payload)
    payload["name"] = payload.get("name") or IMPORTED_WORKFLOW_NAME
    payload["description"] = payload.get("description") or ""
    for key in ("id", "createdAt", "updatedAt"):
        if not payload.get(key):
            payload.pop(key, None)

    try:
        return Workflow.model_validate(payload)
    except PydanticValidationError as e:
        raise WorkflowImportError(
            "document does not match the workflow schema",
            details=e.errors(include_url=False, include_context=False),
        ) from e


def import_workflow(text: str | bytes) -> ImportResult:
    """Import a JSON wire document, reporting failure as a result.

    Args:
        text: Raw document text.

    Returns:
        ImportResult with ``success=True`` and the workflow, or
        ``success=False`` and the reason.
    """
    try:
        workflow = parse_workflow_document(text)
    except WorkflowImportError as e:
        logger.warning(
            f"Workflow import rejected: {e.reason}",
            extra={"context": {"errors": e.details}},
        )
        return ImportResult(success=False, error=e.reason)

    return ImportResult(success=True, workflow=workflow)


__all__ = [
    "IMPORTED_WORKFLOW_NAME",
    "export_filename",
    "export_workflow",
    "import_workflow",
    "parse_workflow_document",
]
