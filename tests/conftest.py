"""Shared fixtures for the patient directory tests."""

import json

import pytest

from services.file_reader import ReadResult
from services.settings_store import MemorySettingsStore


ANN_AND_BO = [
    {"_id": "a1", "firstname": "Ann", "lastname": "Lee", "pid": "P1", "creationdate": "2023-01-01"},
    {"_id": "b2", "firstname": "Bo", "lastname": "Ng", "pid": "P2", "creationdate": "2024-06-01"},
]


class RecordingReader:
    """Read capability returning a canned result and remembering its calls."""

    def __init__(self, result: ReadResult):
        self.result = result
        self.calls = []

    def __call__(self, file_path):
        self.calls.append(file_path)
        return self.result


class RecordingNavigator:
    def __init__(self, fail_navigation=False, fail_focus=False):
        self.fail_navigation = fail_navigation
        self.fail_focus = fail_focus
        self.routes = []
        self.focus_requests = 0

    def navigate_to(self, route):
        if self.fail_navigation:
            raise RuntimeError("router unavailable")
        self.routes.append(route)

    def focus_main_window(self):
        if self.fail_focus:
            raise RuntimeError("window closed")
        self.focus_requests += 1


@pytest.fixture
def store():
    return MemorySettingsStore()


@pytest.fixture
def records():
    return [dict(r) for r in ANN_AND_BO]


@pytest.fixture
def reader(records):
    return RecordingReader(ReadResult(data=records))


@pytest.fixture
def navigator():
    return RecordingNavigator()


@pytest.fixture
def server_dir(tmp_path, records):
    """Server folder holding a patient.json store"""
    (tmp_path / "patient.json").write_text(json.dumps(records), encoding="utf-8")
    return tmp_path


@pytest.fixture
def make_reader():
    return RecordingReader


@pytest.fixture
def make_navigator():
    return RecordingNavigator
