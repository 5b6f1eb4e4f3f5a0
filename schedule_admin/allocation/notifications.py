"""
Toast notifications
Messages are queued in session state and shown on the next run, so they
survive the st.rerun() that follows every save/remove.
"""
import logging
from typing import List, Protocol, Tuple

import streamlit as st

logger = logging.getLogger(__name__)

PENDING_TOASTS_KEY = 'alloc_pending_toasts'

TOAST_ICONS = {
    'success': '✅',
    'info': 'ℹ️',
    'error': '❌',
}


class Notifier(Protocol):
    def success(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class ToastNotifier:
    """Notifier backed by st.toast"""

    def _queue(self) -> List[Tuple[str, str]]:
        if PENDING_TOASTS_KEY not in st.session_state:
            st.session_state[PENDING_TOASTS_KEY] = []
        return st.session_state[PENDING_TOASTS_KEY]

    def _push(self, level: str, message: str):
        self._queue().append((level, message))

    def success(self, message: str):
        self._push('success', message)

    def info(self, message: str):
        self._push('info', message)

    def error(self, message: str):
        self._push('error', message)

    def flush(self):
        """Show every queued toast once"""
        queue = self._queue()
        while queue:
            level, message = queue.pop(0)
            st.toast(message, icon=TOAST_ICONS.get(level))
