"""
Allocation List Controller
===========================
Owns the editor state (open flag + draft) and orchestrates the list actions.

Transitions:
- open_create: reset draft, open editor
- open_edit:   hydrate draft from a list row, open editor
- save:        encode, create/update, close, notify, refetch
- cancel:      reset draft, close editor
- remove:      confirm, delete, refetch, notify (editor untouched)
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from ..api import ApiError
from .form_state import AllocationFormState
from .formatters import (
    format_allocation_label, format_day_of_week, format_entity_name, format_hour
)
from .gateway import AllocationGateway
from .models import PersistedAllocation, to_payload
from .notifications import Notifier

logger = logging.getLogger(__name__)

Refetch = Callable[[], Any]
# confirm(prompt, row) -> True to proceed
Confirm = Callable[[str, PersistedAllocation], bool]

REMOVE_PROMPT = "Are you sure you want to remove this allocation?"


@dataclass(frozen=True)
class Column:
    """Column description handed to the list view"""
    id: str
    label: str
    render: Optional[Callable[[Any], Any]] = None

    def value_for(self, row: PersistedAllocation) -> Any:
        value = getattr(row, self.id)
        return self.render(value) if self.render else value


@dataclass(frozen=True)
class Action:
    """Named row action: handler(row, refetch)"""
    name: str
    handler: Callable[[PersistedAllocation, Refetch], Any]


COLUMNS: List[Column] = [
    Column('id', 'ID'),
    Column('professor', 'Professor', render=format_entity_name),
    Column('course', 'Course', render=format_entity_name),
    Column('day_of_week', 'Day of Week', render=format_day_of_week),
    Column('start_hour', 'Start Hour', render=format_hour),
    Column('end_hour', 'End Hour', render=format_hour),
]


class AllocationListController:
    """Editor/list orchestration for allocations"""

    def __init__(self, gateway: AllocationGateway, notifier: Notifier,
                 confirm: Confirm):
        self.gateway = gateway
        self.notifier = notifier
        self.confirm = confirm
        self.form = AllocationFormState()
        self.editor_open = False

    # ==================== List contracts ====================

    @property
    def columns(self) -> List[Column]:
        return COLUMNS

    @property
    def actions(self) -> List[Action]:
        return [
            Action('Edit', lambda row, refetch: self.open_edit(row)),
            Action('Remove', self.remove),
        ]

    @property
    def editor_title(self) -> str:
        return f"{'Create' if self.form.is_new else 'Update'} Allocation"

    # ==================== Editor transitions ====================

    def open_create(self):
        self.form.reset()
        self.editor_open = True

    def open_edit(self, row: PersistedAllocation):
        self.form.hydrate(row)
        self.editor_open = True

    def set_field(self, name: str, value: Any):
        self.form.set_field(name, value)

    def cancel(self):
        self.form.reset()
        self.editor_open = False

    def save(self, refetch: Refetch) -> bool:
        """
        Persist the draft. Returns True when the editor was closed.

        On failure the editor stays open with the draft intact and no
        refetch happens.
        """
        draft = self.form.draft
        payload = to_payload(draft)

        try:
            if draft.id:
                self.gateway.update(draft.id, payload)
                message = "Allocation updated successfully!"
            else:
                self.gateway.create(payload)
                message = "Allocation created successfully!"
        except ApiError as e:
            logger.error(f"Error saving allocation {draft.id or '(new)'}: {e.message}")
            self.notifier.error(e.message)
            return False

        self.notifier.success(message)
        self.form.reset()
        self.editor_open = False

        self._refetch(refetch)
        return True

    # ==================== Row actions ====================

    def remove(self, row: PersistedAllocation, refetch: Refetch) -> bool:
        """Delete a list row after confirmation. Returns True when deleted."""
        if not self.confirm(REMOVE_PROMPT, row):
            return False

        try:
            self.gateway.delete(row.id)
        except ApiError as e:
            logger.error(f"Error removing allocation {row.id}: {e.message}")
            self.notifier.error(e.message)
            return False

        if self._refetch(refetch):
            self.notifier.info(f"{format_allocation_label(row)} was removed")
        return True

    def _refetch(self, refetch: Refetch) -> bool:
        try:
            refetch()
        except ApiError as e:
            logger.error(f"Error refreshing allocations: {e.message}")
            self.notifier.error(e.message)
            return False
        return True
