"""Tests for helpers, validators, path helpers and configuration."""

import logging
from datetime import date

import pandas as pd
import pytest

from utils import config
from utils.helpers import EPOCH, calculate_age, create_breadcrumbs, format_date, parse_timestamp, truncate_text
from utils.path_helpers import get_database_paths, join_store_path
from utils.validators import (
    is_valid_email,
    validate_credentials,
    validate_patient_id,
    validate_storage_path,
)


class TestParseTimestamp:
    def test_date_string(self):
        assert parse_timestamp("2024-06-01") == pd.Timestamp("2024-06-01", tz="UTC")

    def test_offset_is_normalised_to_utc(self):
        assert parse_timestamp("2024-06-01T02:00:00+02:00") == pd.Timestamp("2024-06-01", tz="UTC")

    def test_milliseconds(self):
        assert parse_timestamp(0) == EPOCH

    @pytest.mark.parametrize("value", [None, "", "   ", "yesterday-ish", "now", "Today", " NOW ", True, {"$date": 1}, float("nan")])
    def test_unusable_values(self, value):
        assert parse_timestamp(value) is None


class TestHelpers:
    def test_calculate_age(self):
        assert calculate_age("2000-06-15", reference_date=date(2024, 6, 14)) == 23
        assert calculate_age("2000-06-15", reference_date=date(2024, 6, 15)) == 24

    def test_calculate_age_missing(self):
        assert calculate_age(None) is None
        assert calculate_age("n/a") is None

    def test_future_birthday_has_no_age(self):
        assert calculate_age("2030-01-01", reference_date=date(2024, 1, 1)) is None

    def test_format_date(self):
        assert format_date("2024-06-01T10:00:00Z") == "2024-06-01"
        assert format_date(None) == "N/A"
        assert format_date("sometime") == "sometime"

    def test_truncate_text(self):
        assert truncate_text("abcdef", max_length=5) == "ab..."
        assert truncate_text(None) == ""

    def test_breadcrumbs(self):
        assert create_breadcrumbs("Patient Details", "Ann Lee") == "Mediview > Patient: Ann Lee > Patient Details"


class TestValidators:
    def test_storage_path(self):
        assert validate_storage_path("C:\\Mediview\\resources\\server") == (True, "")
        assert validate_storage_path("")[0] is False
        assert validate_storage_path(None)[0] is False
        assert validate_storage_path("a" * 2000)[0] is False
        assert validate_storage_path("bad\x00path")[0] is False

    def test_credentials(self):
        assert validate_credentials("doc@example.org", "pw") == (True, "")
        assert validate_credentials("doc@example", "pw")[0] is False
        assert not is_valid_email("")

    @pytest.mark.parametrize("patient_id", ["a1", 17, "65a1f0c2e4b0a1b2c3d4e5f6"])
    def test_valid_patient_ids(self, patient_id):
        assert validate_patient_id(patient_id)[0]

    @pytest.mark.parametrize("patient_id", [None, "", "  ", True, "a/b", "x?y"])
    def test_invalid_patient_ids(self, patient_id):
        assert not validate_patient_id(patient_id)[0]


class TestPathHelpers:
    def test_posix_base(self):
        paths = get_database_paths("/srv/mediview")
        assert paths.base == "/srv/mediview"
        assert paths.patient == "/srv/mediview/patient.json"

    def test_windows_base(self):
        assert join_store_path("C:\\Mediview", "patient.json") == "C:\\Mediview\\patient.json"
        assert join_store_path("D:", "patient.json").startswith("D:")

    def test_filename_from_environment(self, monkeypatch):
        monkeypatch.setenv("PATIENT_STORE_FILENAME", "patients.json")
        assert get_database_paths("/srv").patient == "/srv/patients.json"


class TestConfig:
    def test_directory_defaults(self, monkeypatch):
        for name in ("DEFAULT_SERVER_PATH", "PATIENT_STORE_FILENAME", "STORAGE_PATH_KEY", "SETTINGS_FILE"):
            monkeypatch.delenv(name, raising=False)
        directory = config.get_directory_config()
        assert directory["default_server_path"] == "C:\\Mediview\\resources\\server"
        assert directory["patient_store_filename"] == "patient.json"
        assert directory["storage_path_key"] == "serverPath"
        assert directory["settings_file"].endswith("settings.json")

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        assert config.get_log_level() == "INFO"

    def test_app_config(self, monkeypatch):
        monkeypatch.setenv("PAGINATION_SIZE", "10")
        assert config.get_app_config()["pagination_size"] == 10

    def test_load_environment_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("# comment\nDEFAULT_SERVER_PATH=/from/env\nLOG_LEVEL=WARNING\n", encoding="utf-8")
        monkeypatch.setenv("DEFAULT_SERVER_PATH", "placeholder")
        monkeypatch.delenv("DEFAULT_SERVER_PATH")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        assert config.load_environment_file(str(env_file)) is True
        assert config.get_directory_config()["default_server_path"] == "/from/env"
        assert config.get_log_level() == "ERROR"

    def test_missing_environment_file(self, tmp_path):
        assert config.load_environment_file(str(tmp_path / "nope.env")) is False

    def test_setup_logging(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        config.setup_logging()
        assert logging.getLogger("watchdog").level == logging.WARNING
