"""Automation action catalog.

The catalog lists the automation actions the designer offers for automated
steps. Services depend on the AutomationCatalog protocol so the surrounding
application can supply its own provider; StaticAutomationCatalog is the
built-in default. Lookups are synchronous and side-effect free.

The validator never consults the catalog: any non-empty ``actionId`` passes
validation. The simulator only uses it to enrich step messages.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from hrflow.schemas.automation import AutomationAction


@runtime_checkable
class AutomationCatalog(Protocol):
    """Read-only provider of automation actions."""

    def list_actions(self) -> list[AutomationAction]:
        """Return every available action in display order."""
        ...

    def find_action(self, action_id: str) -> AutomationAction | None:
        """Return the action with ``action_id`` or None."""
        ...


DEFAULT_AUTOMATION_ACTIONS: tuple[AutomationAction, ...] = (
    AutomationAction(
        id="send_email",
        label="Send Email",
        description="Send an email notification to specified recipients",
        params=["to", "subject", "body"],
    ),
    AutomationAction(
        id="generate_doc",
        label="Generate Document",
        description="Generate a document from a template",
        params=["template", "recipient", "format"],
    ),
    AutomationAction(
        id="send_slack",
        label="Send Slack Message",
        description="Send a notification to a Slack channel",
        params=["channel", "message"],
    ),
    AutomationAction(
        id="create_ticket",
        label="Create Ticket",
        description="Create a ticket in the ticketing system",
        params=["title", "priority", "assignee"],
    ),
    AutomationAction(
        id="update_hris",
        label="Update HRIS Record",
        description="Update employee record in HRIS",
        params=["employeeId", "field", "value"],
    ),
    AutomationAction(
        id="schedule_meeting",
        label="Schedule Meeting",
        description="Schedule a calendar meeting",
        params=["title", "attendees", "duration"],
    ),
    AutomationAction(
        id="archive_record",
        label="Archive Record",
        description="Archive a record to long-term storage",
        params=["recordId", "category"],
    ),
    AutomationAction(
        id="trigger_webhook",
        label="Trigger Webhook",
        description="Send data to an external webhook",
        params=["url", "payload"],
    ),
)


class StaticAutomationCatalog:
    """In-memory catalog backed by a fixed list of actions.

    Callers receive copies, so mutating a returned action never changes
    the catalog.
    """

    def __init__(self, actions: Iterable[AutomationAction] | None = None) -> None:
        source = DEFAULT_AUTOMATION_ACTIONS if actions is None else actions
        self._actions: dict[str, AutomationAction] = {a.id: a for a in source}

    def list_actions(self) -> list[AutomationAction]:
        return [action.model_copy(deep=True) for action in self._actions.values()]

    def find_action(self, action_id: str) -> AutomationAction | None:
        action = self._actions.get(action_id)
        return action.model_copy(deep=True) if action is not None else None

    def __len__(self) -> int:
        return len(self._actions)


__all__ = [
    "DEFAULT_AUTOMATION_ACTIONS",
    "AutomationCatalog",
    "StaticAutomationCatalog",
]
