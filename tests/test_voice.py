# tests/test_voice.py

from unittest.mock import MagicMock

import pytest

from aac_app.core.voice import (
    DEFAULT_SETTINGS,
    TEST_PHRASE,
    LocalVoiceStore,
    VoiceContext,
    VoiceDialog,
    adjust,
    clamp,
    resolve_voice_settings,
)


SERVER = {"rate": 1.5, "pitch": 0.8, "voiceName": "X"}
LOCAL = {"voice-rate": "0.7", "voice-pitch": "1.2", "voice-name": "Local"}


@pytest.mark.parametrize("value, delta, expected", [
    (1.0, 0.1, 1.1),
    (1.0, -0.1, 0.9),
    (2.0, 0.1, 2.0),
    (0.5, -0.1, 0.5),
    (1.95, 0.1, 2.0),
])
def test_adjust_steps_and_clamps(value, delta, expected):
    assert adjust(value, delta) == expected


def test_clamp_bounds():
    assert clamp(0.1) == 0.5
    assert clamp(5) == 2.0


# -------------------------------
# Local store
# -------------------------------

def test_local_store_round_trip_and_flush():
    storage = {}
    flush = MagicMock()
    store = LocalVoiceStore(storage, on_change=flush)

    assert store.load() is None
    store.save(SERVER)

    assert storage == {"voice-rate": "1.5", "voice-pitch": "0.8", "voice-name": "X"}
    assert store.load() == SERVER
    flush.assert_called_once()


# -------------------------------
# Resolver
# -------------------------------

def test_context_wins():
    fetch = MagicMock()

    settings = resolve_voice_settings(VoiceContext(SERVER), "token", fetch, LocalVoiceStore(dict(LOCAL)))

    assert settings == SERVER
    fetch.assert_not_called()


def test_server_used_when_token_present():
    fetch = MagicMock(return_value={"success": True, "settings": SERVER})

    settings = resolve_voice_settings(VoiceContext(), "token", fetch, LocalVoiceStore(dict(LOCAL)))

    assert settings == SERVER
    fetch.assert_called_once_with("token")


def test_server_failure_falls_back_to_local():
    fetch = MagicMock(return_value={"error": "Invalid token", "status": 401})

    settings = resolve_voice_settings(VoiceContext(), "token", fetch, LocalVoiceStore(dict(LOCAL)))

    assert settings == {"rate": 0.7, "pitch": 1.2, "voiceName": "Local"}


def test_no_token_skips_server():
    fetch = MagicMock()

    settings = resolve_voice_settings(None, None, fetch, LocalVoiceStore(dict(LOCAL)))

    assert settings["voiceName"] == "Local"
    fetch.assert_not_called()


def test_malformed_local_values_fall_back_to_default():
    store = LocalVoiceStore({"voice-rate": "fast"})

    assert resolve_voice_settings(None, None, MagicMock(), store) == DEFAULT_SETTINGS


def test_defaults_when_nothing_is_saved():
    assert resolve_voice_settings(VoiceContext(), None, MagicMock(), LocalVoiceStore({})) == DEFAULT_SETTINGS


# -------------------------------
# Dialog
# -------------------------------

def test_dialog_falls_back_to_first_available_voice():
    dialog = VoiceDialog.from_settings({"rate": 1, "pitch": 1, "voiceName": "Gone"}, ["Alex", "Samantha"])

    assert dialog.voice_name == "Alex"


def test_dialog_keeps_available_voice():
    dialog = VoiceDialog.from_settings(SERVER, ["Alex", "X"])

    assert dialog.voice_name == "X"


def test_dialog_test_text():
    dialog = VoiceDialog()

    assert dialog.test_text("I want") == "I want"
    assert dialog.test_text("") == TEST_PHRASE


def test_save_without_token_stays_local():
    storage, context, save_remote = {}, VoiceContext(), MagicMock()
    dialog = VoiceDialog()
    dialog.adjust_rate(0.1)

    status = dialog.save(LocalVoiceStore(storage), context, None, save_remote)

    assert status == "saved"
    assert storage["voice-rate"] == "1.1"
    assert context.settings["rate"] == 1.1
    save_remote.assert_not_called()


def test_save_with_token_persists_to_server():
    save_remote = MagicMock(return_value={"success": True, "message": "Voice settings saved successfully"})
    dialog = VoiceDialog(rate=1.5, pitch=0.8, voice_name="X")

    status = dialog.save(LocalVoiceStore({}), VoiceContext(), "token", save_remote)

    assert status == "success"
    save_remote.assert_called_once_with("token", SERVER)


def test_save_server_error_keeps_local_copy():
    storage, context = {}, VoiceContext()
    save_remote = MagicMock(return_value={"error": "Server error while saving voice settings", "status": 500})
    dialog = VoiceDialog(rate=1.5, pitch=0.8, voice_name="X")

    status = dialog.save(LocalVoiceStore(storage), context, "token", save_remote)

    assert status == "error"
    assert storage["voice-name"] == "X"
    assert context.settings == SERVER
