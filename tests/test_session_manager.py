"""Tests for the directory session orchestration."""

import pytest

from services.directory_picker import PickResult
from services.file_reader import ReadResult
from services.patient_loader import PatientLoader
from services.selection_flow import SelectionState
from services.session_manager import SessionManager
from services.settings_store import JsonSettingsStore
from utils.config import DEFAULT_SERVER_PATH


class FakePicker:
    def __init__(self, result):
        self.result = result
        self.defaults = []

    def pick(self, default_path=None, title=""):
        self.defaults.append(default_path)
        return self.result


@pytest.fixture
def manager(store, reader, navigator):
    return SessionManager(
        store,
        loader=PatientLoader(reader),
        navigator=navigator,
        picker=FakePicker(PickResult(canceled=True)),
    )


@pytest.fixture
def logged_in(manager):
    ok, _ = manager.login("doctor@example.org", "secret")
    assert ok
    return manager


class TestAuthentication:
    def test_new_session_is_not_authenticated(self, manager):
        session = manager.create_session()
        assert not session.is_authenticated
        assert session.email is None

    def test_login_persists_email_and_flag_only(self, manager, store):
        ok, message = manager.login("doctor@example.org", "secret")
        assert ok and message == ""
        session = manager.create_session()
        assert session.is_authenticated
        assert session.email == "doctor@example.org"
        assert "secret" not in store._values.values()

    @pytest.mark.parametrize("email,password", [("", "x"), ("doctor@example.org", ""), ("not-an-email", "x")])
    def test_invalid_login(self, manager, email, password):
        ok, message = manager.login(email, password)
        assert not ok
        assert message
        assert not manager.is_authenticated()

    def test_logout(self, logged_in):
        logged_in.logout()
        assert not logged_in.is_authenticated()


class TestLoading:
    def test_without_configured_path(self, logged_in, reader):
        session = logged_in.create_session()
        assert session.server_path == DEFAULT_SERVER_PATH

        assert logged_in.load_patients(session) is False
        assert session.error == "Server path not configured"
        assert session.error_kind == "config_missing"
        assert reader.calls == []
        assert not session.can_retry
        assert session.loaded

    def test_successful_load(self, logged_in, store):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        assert logged_in.load_patients(session) is True
        assert [p.pid for p in session.patients] == ["P2", "P1"]
        assert session.error is None
        assert not session.is_loading

    def test_failed_reload_keeps_previous_collection(self, logged_in, reader):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        logged_in.load_patients(session)
        previous = session.patients

        reader.result = ReadResult(error="disk error")
        assert logged_in.load_patients(session) is False
        assert session.patients == previous
        assert session.error == "Failed to load patient data: disk error"
        assert session.error_kind == "read_failed"
        assert session.can_retry

    def test_retry_clears_error(self, logged_in, reader, records):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        reader.result = ReadResult(data={"not": "array"})
        logged_in.load_patients(session)
        assert session.error_kind == "invalid_format"
        assert not session.can_retry

        reader.result = ReadResult(data=records)
        assert logged_in.load_patients(session) is True
        assert session.error is None
        assert not session.can_retry

    def test_reentrant_load_is_ignored(self, logged_in, reader):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        session.is_loading = True
        assert logged_in.load_patients(session) is False
        assert reader.calls == []

    def test_unexpected_error_is_reported(self, logged_in, store):
        class BrokenLoader:
            def load(self, path):
                raise ValueError("boom")

        logged_in.loader = BrokenLoader()
        session = logged_in.create_session()
        assert logged_in.load_patients(session) is False
        assert session.error == "Unexpected error: boom"
        assert session.can_retry
        assert not session.is_loading


class TestConfiguration:
    def test_save_path_stores_and_reloads(self, logged_in, reader):
        session = logged_in.create_session()
        logged_in.load_patients(session)
        logged_in.open_config(session)
        assert session.show_config_dialog

        ok, _ = logged_in.save_path(session, "/srv/new")
        assert ok
        assert logged_in.path_config.get_stored_path() == "/srv/new"
        assert not session.show_config_dialog
        assert session.error is None
        assert reader.calls == ["/srv/new/patient.json"]

    def test_save_rejects_blank_path(self, logged_in):
        session = logged_in.create_session()
        ok, message = logged_in.save_path(session, "  ")
        assert not ok
        assert message == "Server path is required"
        assert logged_in.path_config.get_stored_path() is None

    def test_reset_only_changes_field(self, logged_in):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        assert logged_in.reset_path(session) == DEFAULT_SERVER_PATH
        assert session.server_path == DEFAULT_SERVER_PATH
        assert logged_in.path_config.get_stored_path() == "/srv"

    def test_browse_uses_picked_directory(self, logged_in):
        logged_in.picker = FakePicker(PickResult(canceled=False, paths=["/picked"]))
        session = logged_in.create_session()
        assert logged_in.browse_path(session) == "/picked"
        assert session.server_path == "/picked"
        assert logged_in.picker.defaults == [DEFAULT_SERVER_PATH]

    def test_canceled_browse_keeps_field(self, logged_in):
        session = logged_in.create_session()
        assert logged_in.browse_path(session) is None
        assert session.server_path == DEFAULT_SERVER_PATH


class TestSelection:
    def test_select_hands_off_and_closes(self, logged_in, navigator):
        logged_in.path_config.store_path("/srv")
        session = logged_in.create_session()
        logged_in.load_patients(session)

        view = logged_in.open_selection(session)
        assert len(view) == 2
        assert logged_in.select_patient(session, "a1")
        assert navigator.routes == ["/patient/a1"]
        assert session.selection.state is SelectionState.IDLE

    def test_teardown_closes_everything(self, logged_in):
        session = logged_in.create_session()
        logged_in.open_selection(session)
        logged_in.open_config(session)
        session.is_loading = True

        logged_in.teardown(session)
        assert session.selection.state is SelectionState.IDLE
        assert not session.show_config_dialog
        assert not session.is_loading


class TestCorruptSettings:
    def test_save_path_recovers_from_corrupt_settings(self, tmp_path, reader, navigator):
        settings_file = tmp_path / "settings.json"
        settings_file.write_text("{not json", encoding="utf-8")
        manager = SessionManager(
            JsonSettingsStore(str(settings_file)),
            loader=PatientLoader(reader),
            navigator=navigator,
            picker=FakePicker(PickResult(canceled=True)),
        )
        session = manager.create_session()
        manager.load_patients(session)
        assert session.error_kind == "config_missing"

        ok, message = manager.save_path(session, "/srv")
        assert ok, message
        assert manager.path_config.get_stored_path() == "/srv"
        assert session.error is None
        assert [p.pid for p in session.patients] == ["P2", "P1"]
