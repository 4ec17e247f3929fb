from __future__ import annotations

import pytest

from study_tracker.domain import Settings, UnknownSetting


def test_defaults(settings):
    loaded = settings.load()

    assert loaded.reminders_enabled is True
    assert loaded.dark_mode_enabled is False
    assert loaded.motivational_messages_enabled is True
    assert loaded.quick_add_enabled is True


def test_missing_and_unknown_keys_fall_back(settings, state_store):
    state_store.write_state({"sessions": [], "settings": {"darkModeEnabled": True, "legacyFlag": 1}})

    loaded = settings.load()

    assert loaded == Settings(dark_mode_enabled=True)


def test_non_boolean_values_use_defaults(settings, state_store):
    state_store.write_state({"sessions": [], "settings": {"remindersEnabled": "no"}})

    assert settings.load().reminders_enabled is True


def test_toggle_persists_without_touching_sessions(settings, sessions, make_draft):
    session = sessions.create(make_draft())

    updated = settings.toggle("reminders_enabled", False)

    assert updated.reminders_enabled is False
    assert settings.load().reminders_enabled is False
    assert sessions.list_all() == [session]


def test_toggle_unknown_setting(settings):
    with pytest.raises(UnknownSetting):
        settings.toggle("autoplay", True)


def test_settings_record_uses_stored_key_names():
    assert Settings().to_record() == {
        "remindersEnabled": True,
        "darkModeEnabled": False,
        "motivationalMessagesEnabled": True,
        "quickAddEnabled": True,
    }
