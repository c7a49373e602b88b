# aac_app/core/voice.py

import logging
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass


logger = logging.getLogger(__name__)

MIN_VALUE = 0.5
MAX_VALUE = 2.0
STEP = 0.1

DEFAULT_SETTINGS = {"rate": 1.0, "pitch": 1.0, "voiceName": ""}

TEST_PHRASE = "Testing the voice to hear how it sounds."

RATE_KEY = "voice-rate"
PITCH_KEY = "voice-pitch"
NAME_KEY = "voice-name"


def clamp(value: float) -> float:
    return max(MIN_VALUE, min(MAX_VALUE, value))


def adjust(value: float, delta: float) -> float:
    return round(clamp(value + delta), 1)


def normalize(settings: dict) -> dict:
    """
    Coerces a settings dict from any source into {rate, pitch, voiceName}.
    Raises ValueError or TypeError on unusable values.
    """
    return {
        "rate": float(settings.get("rate") or 1),
        "pitch": float(settings.get("pitch") or 1),
        "voiceName": str(settings.get("voiceName") or ""),
    }


# -------------------------------
# Sources
# -------------------------------

class VoiceContext:
    """
    Voice settings shared by the communicator and the voice dialog for the
    lifetime of a session.
    """

    def __init__(self, settings: dict | None = None):
        self.settings = settings

    def set(self, settings: dict) -> None:
        self.settings = dict(settings)

    def clear(self) -> None:
        self.settings = None


class LocalVoiceStore:
    """
    Voice settings kept on the client, one string value per key.
    `on_change` is called after every write (e.g. to flush cookies).
    """

    def __init__(self, storage: MutableMapping, on_change: Callable[[], None] | None = None):
        self.storage = storage
        self.on_change = on_change

    def load(self) -> dict | None:
        rate = self.storage.get(RATE_KEY)
        pitch = self.storage.get(PITCH_KEY)
        name = self.storage.get(NAME_KEY)
        if rate is None and pitch is None and name is None:
            return None
        return normalize({"rate": rate, "pitch": pitch, "voiceName": name})

    def save(self, settings: dict) -> None:
        self.storage[RATE_KEY] = str(settings["rate"])
        self.storage[PITCH_KEY] = str(settings["pitch"])
        self.storage[NAME_KEY] = settings["voiceName"]
        if self.on_change:
            self.on_change()


def resolve_voice_settings(
    context: VoiceContext | None,
    token: str | None,
    fetch_remote: Callable[[str], dict],
    local: LocalVoiceStore | None,
) -> dict:
    """
    Picks the voice settings to use, in order: shared context, server (only
    with a token), local store, defaults. A failing step falls through.
    """
    if context is not None and context.settings:
        return dict(context.settings)

    if token:
        result = fetch_remote(token)
        if isinstance(result, dict) and not result.get("error"):
            try:
                return normalize(result.get("settings", result))
            except (TypeError, ValueError):
                logger.warning("Ignoring malformed voice settings from server: %s", result)
        else:
            logger.warning("Could not load voice settings from server: %s", result)

    if local is not None:
        try:
            saved = local.load()
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed local voice settings")
            saved = None
        if saved:
            return saved

    return dict(DEFAULT_SETTINGS)


# -------------------------------
# Voice dialog draft
# -------------------------------

@dataclass
class VoiceDialog:
    """
    Unsaved edits made in the voice settings dialog.
    """
    rate: float = 1.0
    pitch: float = 1.0
    voice_name: str = ""

    @classmethod
    def from_settings(cls, settings: dict, available_voices: list[str] | None = None) -> "VoiceDialog":
        voice_name = settings.get("voiceName", "")
        if available_voices and voice_name not in available_voices:
            voice_name = available_voices[0]
        return cls(
            rate=clamp(float(settings.get("rate", 1))),
            pitch=clamp(float(settings.get("pitch", 1))),
            voice_name=voice_name,
        )

    def adjust_rate(self, delta: float) -> float:
        self.rate = adjust(self.rate, delta)
        return self.rate

    def adjust_pitch(self, delta: float) -> float:
        self.pitch = adjust(self.pitch, delta)
        return self.pitch

    def select_voice(self, name: str) -> None:
        self.voice_name = name

    def settings(self) -> dict:
        return {"rate": self.rate, "pitch": self.pitch, "voiceName": self.voice_name}

    def test_text(self, sentence: str) -> str:
        return sentence if sentence.strip() else TEST_PHRASE

    def save(
        self,
        local: LocalVoiceStore,
        context: VoiceContext,
        token: str | None,
        save_remote: Callable[[str, dict], dict],
    ) -> str:
        """
        Persists locally and to the shared context every time, and to the
        server only with a token. Returns "saved" (local only), "success" or
        "error" (server write failed; local write still stands).
        """
        settings = self.settings()
        local.save(settings)
        context.set(settings)

        if not token:
            return "saved"

        result = save_remote(token, settings)
        if isinstance(result, dict) and result.get("success"):
            return "success"
        logger.warning("Could not save voice settings to server: %s", result)
        return "error"
