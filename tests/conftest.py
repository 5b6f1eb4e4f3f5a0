"""
Pytest configuration and shared fixtures for the Schedule Allocations test suite.

This module provides:
- A recording notifier standing in for toasts
- An ApiClient wired to httpx.MockTransport (no network)
- Sample allocation rows as returned by the API
"""
import json
from typing import Callable, Dict, List, Tuple

import httpx
import pytest

from schedule_admin.api import ApiClient
from schedule_admin.allocation.models import PersistedAllocation


class RecordingNotifier:
    """Collects (level, message) pairs instead of showing toasts"""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str):
        self.messages.append(('success', message))

    def info(self, message: str):
        self.messages.append(('info', message))

    def error(self, message: str):
        self.messages.append(('error', message))


class FakeApi:
    """Route table + request log for httpx.MockTransport"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, status_code: int = 200, body=None):
        def responder(request: httpx.Request) -> httpx.Response:
            if body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=body)
        self.routes[(method, path)] = responder

    def fail(self, method: str, path: str, exc: Exception):
        def responder(request: httpx.Request) -> httpx.Response:
            raise exc
        self.routes[(method, path)] = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responder = self.routes.get((request.method, request.url.path))
        if responder is None:
            return httpx.Response(404, json={'message': f'No route for {request.method} {request.url.path}'})
        return responder(request)

    def calls(self, method: str = None) -> List[Tuple[str, str]]:
        return [
            (r.method, r.url.path) for r in self.requests
            if method is None or r.method == method
        ]

    @staticmethod
    def body(request: httpx.Request):
        return json.loads(request.content) if request.content else None


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def api_client(fake_api: FakeApi) -> ApiClient:
    client = ApiClient('http://api.test', transport=httpx.MockTransport(fake_api.handler))
    yield client
    client.close()


@pytest.fixture
def sample_row_data() -> dict:
    return {
        'id': 5,
        'professor': {'id': 2, 'name': 'A'},
        'course': {'id': 7, 'name': 'B'},
        'dayOfWeek': 'MON',
        'startHour': '08:00+0000',
        'endHour': '10:00+0000',
    }


@pytest.fixture
def sample_row(sample_row_data) -> PersistedAllocation:
    return PersistedAllocation.from_dict(sample_row_data)


@pytest.fixture
def session_state(monkeypatch) -> dict:
    """Plain dict standing in for st.session_state outside a script run"""
    import streamlit as st

    state = {}
    monkeypatch.setattr(st, 'session_state', state)
    return state


@pytest.fixture
def toasts(monkeypatch) -> List[Tuple[str, str]]:
    """Records st.toast calls as (message, icon)"""
    import streamlit as st

    shown = []
    monkeypatch.setattr(st, 'toast', lambda message, icon=None: shown.append((message, icon)))
    return shown
