"""
Remove Confirmation Modal
The controller asks DialogConfirm before deleting. The first ask records the
row as pending and answers "no"; the dialog then shows the question, and
its "Remove" button approves that row and re-runs the removal.
"""
import logging

import streamlit as st

from .controller import AllocationListController
from .formatters import format_allocation_label
from .list_view import AllocationListView
from .models import PersistedAllocation

logger = logging.getLogger(__name__)

PENDING_REMOVAL_KEY = 'alloc_pending_removal'
APPROVED_REMOVAL_KEY = 'alloc_approved_removal'


class DialogConfirm:
    """Confirm callable backed by the remove dialog"""

    def __call__(self, prompt: str, row: PersistedAllocation) -> bool:
        if st.session_state.get(APPROVED_REMOVAL_KEY) == row.id:
            del st.session_state[APPROVED_REMOVAL_KEY]
            return True
        st.session_state[PENDING_REMOVAL_KEY] = {'row': row, 'prompt': prompt}
        return False


def _close():
    st.session_state.pop(PENDING_REMOVAL_KEY, None)
    st.session_state.pop(APPROVED_REMOVAL_KEY, None)


@st.dialog("Remove Allocation", width="small")
def show_remove_modal(controller: AllocationListController, list_view: AllocationListView):
    """Blocking yes/no question before a delete"""
    pending = st.session_state.get(PENDING_REMOVAL_KEY)

    if not pending:
        st.error("No allocation selected")
        if st.button("Close"):
            _close()
            st.rerun()
        return

    row = pending['row']
    st.markdown(f"### {format_allocation_label(row)}")
    st.warning(f"⚠️ {pending['prompt']}")

    col1, col2 = st.columns(2)
    with col1:
        if st.button("Remove", type="primary", use_container_width=True):
            st.session_state.pop(PENDING_REMOVAL_KEY, None)
            st.session_state[APPROVED_REMOVAL_KEY] = row.id
            controller.remove(row, list_view.refetch)
            _close()
            st.rerun()

    with col2:
        if st.button("Keep", use_container_width=True):
            logger.debug(f"Removal of allocation {row.id} declined")
            _close()
            st.rerun()
