import json
import logging

import pytest

from salary_ticker.data.settings_store import STORAGE_KEY, load_settings, reset_settings, save_settings
from salary_ticker.domain.models import DailyRecord, UserSettings


@pytest.fixture
def store(tmp_path):
    return tmp_path / "nested" / "settings.json"


def write_raw(path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")


def test_missing_file_gives_defaults(store):
    settings = load_settings(store)
    assert settings == UserSettings()
    assert settings.rest_days == [0, 6]
    assert settings.monthly_salary == 10000


def test_round_trip_keeps_history(store):
    settings = UserSettings(
        monthly_salary=12000,
        rest_days=[0],
        work_start_hour="08:30",
        work_end_hour="17:30",
        has_completed_onboarding=True,
        history=[DailyRecord("2026-10-16", 512.5, False, 12000)],
    )
    save_settings(settings, store)
    assert load_settings(store) == settings


def test_blob_uses_camel_case_under_fixed_key(store):
    save_settings(UserSettings(history=[DailyRecord("2026-10-16", 1.0, True, 5.0)]), store)
    raw = json.loads(store.read_text(encoding="utf-8"))

    blob = raw[STORAGE_KEY]
    assert blob["monthlySalary"] == 10000
    assert blob["restDays"] == [0, 6]
    assert blob["workStartHour"] == "09:00"
    assert blob["history"] == [
        {"date": "2026-10-16", "earned": 1.0, "isRestDay": True, "salarySnapshot": 5.0}
    ]


def test_partial_blob_merged_over_defaults(store):
    write_raw(store, json.dumps({STORAGE_KEY: {"monthlySalary": 5000, "hasCompletedOnboarding": True}}))
    settings = load_settings(store)

    assert settings.monthly_salary == 5000
    assert settings.has_completed_onboarding is True
    assert settings.privacy_mode is False
    assert settings.work_end_hour == "18:00"


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "[1, 2, 3]",
        json.dumps({STORAGE_KEY: {"restDays": [9]}}),
        json.dumps({STORAGE_KEY: {"workStartHour": "nine"}}),
        json.dumps({STORAGE_KEY: {"history": [{"earned": 1}]}}),
        json.dumps({STORAGE_KEY: "oops"}),
    ],
)
def test_malformed_store_falls_back_to_defaults(store, payload, caplog):
    write_raw(store, payload)
    with caplog.at_level(logging.WARNING):
        assert load_settings(store) == UserSettings()
    assert caplog.records


def test_inverted_hours_load_with_warning(store, caplog):
    write_raw(store, json.dumps({STORAGE_KEY: {"workStartHour": "18:00", "workEndHour": "09:00"}}))
    with caplog.at_level(logging.WARNING):
        settings = load_settings(store)
    assert settings.work_start_hour == "18:00"
    assert "accrue nothing" in caplog.text


def test_save_preserves_other_keys(store):
    write_raw(store, json.dumps({"other": 1}))
    save_settings(UserSettings(), store)
    raw = json.loads(store.read_text(encoding="utf-8"))
    assert raw["other"] == 1
    assert STORAGE_KEY in raw


def test_reset(store):
    save_settings(UserSettings(monthly_salary=1), store)
    assert reset_settings(store) == UserSettings()
    assert load_settings(store) == UserSettings()
    assert STORAGE_KEY not in json.loads(store.read_text(encoding="utf-8"))


def test_reset_without_file(store):
    assert reset_settings(store) == UserSettings()
    assert not store.exists()


def test_privacy_flag_round_trips(store):
    save_settings(UserSettings(privacy_mode=True), store)
    assert load_settings(store).privacy_mode is True
    assert json.loads(store.read_text(encoding="utf-8"))[STORAGE_KEY]["privacyMode"] is True
