"""
Allocation Editor Modal
Create/update dialog. Every widget writes straight into the controller's
draft through set_field; the draft is the only source of truth.
"""
import logging
from typing import List

import streamlit as st

from . import time_codec
from .controller import AllocationListController
from .formatters import DAYS_OF_WEEK
from .list_view import AllocationListView
from .reference_data import ReferenceData

logger = logging.getLogger(__name__)


def _widget_key(controller: AllocationListController, field: str) -> str:
    # New revision -> fresh widgets seeded from the new draft
    return f"alloc_{field}_{controller.form.revision}"


def _on_change(controller: AllocationListController, field: str, key: str):
    controller.set_field(field, st.session_state[key])


def _id_options(current: int, ids: List[int]) -> List[int]:
    options = [0] + ids
    if current not in options:
        options.append(current)
    return options


def _render_fields(controller: AllocationListController, reference: ReferenceData):
    draft = controller.form.draft

    # Professor
    key = _widget_key(controller, 'professor_id')
    options = _id_options(draft.professor_id, [p.id for p in reference.professors])
    st.selectbox(
        "Professor",
        options=options,
        index=options.index(draft.professor_id),
        format_func=lambda x: "Choose a professor" if not x else (reference.professor_name(x) or f"#{x}"),
        key=key,
        on_change=_on_change,
        args=(controller, 'professor_id', key),
    )

    # Course
    key = _widget_key(controller, 'course_id')
    options = _id_options(draft.course_id, [c.id for c in reference.courses])
    st.selectbox(
        "Course",
        options=options,
        index=options.index(draft.course_id),
        format_func=lambda x: "Choose a course" if not x else (reference.course_name(x) or f"#{x}"),
        key=key,
        on_change=_on_change,
        args=(controller, 'course_id', key),
    )

    # Day of week
    key = _widget_key(controller, 'day_of_week')
    day_labels = dict(DAYS_OF_WEEK)
    day_options = [''] + [code for code, _ in DAYS_OF_WEEK]
    if draft.day_of_week not in day_options:
        day_options.append(draft.day_of_week)
    st.selectbox(
        "Day of Week",
        options=day_options,
        index=day_options.index(draft.day_of_week),
        format_func=lambda x: "Choose a day" if not x else day_labels.get(x, x),
        key=key,
        on_change=_on_change,
        args=(controller, 'day_of_week', key),
    )

    # Hours
    col1, col2 = st.columns(2)
    with col1:
        key = _widget_key(controller, 'start_hour')
        st.text_input(
            "Start Hour",
            value=time_codec.decode(draft.start_hour) or '',
            placeholder="Ex.: 20:00",
            key=key,
            on_change=_on_change,
            args=(controller, 'start_hour', key),
        )
    with col2:
        key = _widget_key(controller, 'end_hour')
        st.text_input(
            "End Hour",
            value=time_codec.decode(draft.end_hour) or '',
            placeholder="Ex.: 21:00",
            key=key,
            on_change=_on_change,
            args=(controller, 'end_hour', key),
        )


def _render_editor(controller: AllocationListController, list_view: AllocationListView,
                   reference: ReferenceData):
    _render_fields(controller, reference)

    st.divider()
    col1, col2 = st.columns(2)
    with col1:
        if st.button("Save", type="primary", use_container_width=True):
            # Failed saves keep the editor open; the rerun redraws it with the draft intact
            controller.save(list_view.refetch)
            st.rerun()
    with col2:
        if st.button("Close", use_container_width=True):
            controller.cancel()
            st.rerun()


def show_allocation_modal(controller: AllocationListController, list_view: AllocationListView,
                          reference: ReferenceData):
    """Open the editor dialog titled after the draft's mode"""
    dialog = st.dialog(controller.editor_title, width="medium")(_render_editor)
    dialog(controller, list_view, reference)
