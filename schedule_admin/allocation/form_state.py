"""
Allocation Form State
Holds the single draft being created or edited.
"""
import dataclasses
import logging
from typing import Any

from .models import (
    AllocationRecord, EMPTY_RECORD, PersistedAllocation, RECORD_FIELDS, to_record
)

logger = logging.getLogger(__name__)


class AllocationFormState:
    """Single in-progress allocation draft"""

    def __init__(self):
        self.draft: AllocationRecord = EMPTY_RECORD
        # Bumped whenever the draft is replaced wholesale; the editor keys its widgets on it
        self.revision = 0

    @property
    def is_new(self) -> bool:
        return self.draft.is_new

    def reset(self):
        """Replace the draft with the empty sentinel"""
        self.draft = EMPTY_RECORD
        self.revision += 1

    def hydrate(self, row: PersistedAllocation):
        """Replace the draft with the flattened form of a list row"""
        self.draft = to_record(row)
        self.revision += 1
        logger.debug(f"Hydrated draft from allocation {row.id}")

    def set_field(self, name: str, value: Any):
        """Replace exactly one field of the draft"""
        if name not in RECORD_FIELDS:
            raise KeyError(f"Unknown allocation field: {name}")
        self.draft = dataclasses.replace(self.draft, **{name: value})

    def update(self, **changes: Any):
        """Replace several fields at once; unknown names raise TypeError"""
        self.draft = dataclasses.replace(self.draft, **changes)
