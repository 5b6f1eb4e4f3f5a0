"""
Allocation Module
=================
Editor/list synchronization for schedule allocations.

Components:
- time_codec: display <-> canonical hour strings
- models: persisted rows, editor drafts and the mapping between them
- reference_data: professor/course loading
- form_state: the single editable draft
- gateway: create/update/delete against /allocations
- controller: editor state machine and list actions

Streamlit-facing modules (list_view, modal_allocation, modal_remove,
notifications) are imported directly by the page.
"""

from .models import (
    AllocationRecord,
    Course,
    EMPTY_RECORD,
    PersistedAllocation,
    Professor,
    to_payload,
    to_record,
)
from .form_state import AllocationFormState
from .gateway import AllocationGateway
from .reference_data import ReferenceData, ReferenceDataLoader
from .controller import Action, AllocationListController, Column, COLUMNS

__all__ = [
    'AllocationRecord',
    'Course',
    'EMPTY_RECORD',
    'PersistedAllocation',
    'Professor',
    'to_payload',
    'to_record',
    'AllocationFormState',
    'AllocationGateway',
    'ReferenceData',
    'ReferenceDataLoader',
    'Action',
    'AllocationListController',
    'Column',
    'COLUMNS',
]
