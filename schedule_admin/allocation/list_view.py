"""
Allocation List View
Fetches GET /allocations, renders the rows through the controller's column
description and wires per-row action buttons.
"""
import logging
from typing import List, Optional

import pandas as pd
import streamlit as st

from ..api import ApiClient, ApiError, parse_object_list
from .controller import Action, Column
from .gateway import ALLOCATIONS_ENDPOINT
from .models import PersistedAllocation
from .notifications import Notifier

logger = logging.getLogger(__name__)


def build_table(rows: List[PersistedAllocation], columns: List[Column]) -> pd.DataFrame:
    """One display row per allocation, one display column per Column"""
    data = [[column.value_for(row) for column in columns] for row in rows]
    return pd.DataFrame(data, columns=[column.label for column in columns])


class AllocationListView:
    """List collaborator owning the allocation rows and refetch"""

    def __init__(self, client: ApiClient, notifier: Notifier,
                 endpoint: str = ALLOCATIONS_ENDPOINT, state_key: str = 'alloc_rows'):
        self.client = client
        self.notifier = notifier
        self.endpoint = endpoint
        self.state_key = state_key

    @property
    def rows(self) -> Optional[List[PersistedAllocation]]:
        return st.session_state.get(self.state_key)

    def fetch(self) -> List[PersistedAllocation]:
        return parse_object_list(self.client.get(self.endpoint), self.endpoint,
                                 PersistedAllocation.from_dict)

    def refetch(self):
        """Reload the rows; raises ApiError on failure"""
        st.session_state[self.state_key] = self.fetch()
        logger.info(f"Loaded {len(self.rows)} allocations")

    def ensure_loaded(self):
        """First load of the list; failures become a notification"""
        if self.rows is not None:
            return
        try:
            self.refetch()
        except ApiError as e:
            logger.error(f"Error loading allocations: {e.message}")
            self.notifier.error(e.message)
            st.session_state[self.state_key] = []

    def render(self, columns: List[Column], actions: List[Action]):
        rows = self.rows

        if rows is None:
            st.info("⏳ Loading data...")
            return

        if not rows:
            st.warning("No allocations found")
            return

        st.subheader(f"📋 Allocations ({len(rows):,})")
        st.dataframe(build_table(rows, columns), hide_index=True, use_container_width=True)

        st.caption("💡 Choose an action for an allocation")
        for row in rows:
            cols = st.columns([6] + [1] * len(actions))
            with cols[0]:
                st.write(f"**#{row.id}** {row.professor_name} · {row.course_name}")
            for col, action in zip(cols[1:], actions):
                with col:
                    if st.button(action.name, key=f"alloc_{action.name.lower()}_{row.id}",
                                 use_container_width=True):
                        action.handler(row, self.refetch)
                        st.rerun()
