# aac_app/core/speech.py

import json
import time
from dataclasses import dataclass, field


# Average speaking pace at rate 1.0, used to estimate when an utterance ends.
SECONDS_PER_WORD = 0.4
END_PADDING = 0.5


def _js_string(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


@dataclass
class Utterance:
    text: str
    rate: float = 1
    pitch: float = 1
    voice_name: str = ""
    started_at: float = field(default_factory=time.time)

    @property
    def duration(self) -> float:
        words = max(len(self.text.split()), 1)
        return words * SECONDS_PER_WORD / max(self.rate, 0.1) + END_PADDING

    def ends_at(self) -> float:
        return self.started_at + self.duration

    def script(self) -> str:
        """
        Browser-side Web Speech API call. The page speaks through the parent
        window so the utterance outlives the component iframe.
        """
        return f"""
<script>
const synth = (window.parent || window).speechSynthesis;
synth.cancel();
const utterance = new SpeechSynthesisUtterance({_js_string(self.text)});
utterance.rate = {self.rate};
utterance.pitch = {self.pitch};
const voiceName = {_js_string(self.voice_name)};
const speak = () => {{
    const voice = synth.getVoices().find(v => v.name === voiceName);
    if (voice) {{
        utterance.voice = voice;
    }}
    synth.speak(utterance);
}};
if (voiceName && synth.getVoices().length === 0) {{
    synth.onvoiceschanged = () => {{ synth.onvoiceschanged = null; speak(); }};
}} else {{
    speak();
}}
</script>
"""


def cancel_script() -> str:
    return "<script>(window.parent || window).speechSynthesis.cancel();</script>"


class SpeechController:
    """
    Tracks whether the communicator is speaking. The browser reports the end
    of an utterance only to itself, so a natural end is taken to be the
    estimated duration of the utterance.
    """

    def __init__(self):
        self.current: Utterance | None = None

    @property
    def is_speaking(self) -> bool:
        return self.current is not None

    def refresh(self, now: float | None = None) -> None:
        if now is None:
            now = time.time()
        if self.current is not None and now >= self.current.ends_at():
            self.finish()

    def speak(self, text: str, settings: dict) -> Utterance | None:
        if not text.strip():
            return None
        self.current = Utterance(
            text=text,
            rate=settings.get("rate", 1),
            pitch=settings.get("pitch", 1),
            voice_name=settings.get("voiceName", ""),
        )
        return self.current

    def cancel(self) -> None:
        self.current = None

    def finish(self) -> None:
        self.current = None

    def toggle(self, text: str, settings: dict) -> str | None:
        """
        Stops speech when speaking, otherwise starts speaking `text`.
        Returns the browser script to run, or None when there is nothing to do.
        """
        self.refresh()
        if self.is_speaking:
            self.cancel()
            return cancel_script()
        utterance = self.speak(text, settings)
        return utterance.script() if utterance else None
