"""Voice panel: text-to-speech items and translation."""

from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass, field

from dwiju_gateway.models.requests import Capability, VoiceTask
from dwiju_gateway.panels.base import Panel, VoiceInputMixin
from dwiju_gateway.panels.devices import AudioPlayer, Recognizer

VOICES = ("alloy", "echo", "fable", "onyx", "nova", "shimmer")


@dataclass
class AudioItem:
    text: str
    voice: str
    status: str = "generating"  # generating | completed | error
    audio_base64: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def data_url(self) -> str | None:
        if not self.audio_base64:
            return None
        return f"data:audio/mp3;base64,{self.audio_base64}"


class VoicePanel(VoiceInputMixin, Panel):
    capability = Capability.VOICE

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.tts_text = ""
        self.selected_voice = "alloy"
        self.audio_items: list[AudioItem] = []
        self.currently_playing: str | None = None

        self.translate_text = ""
        self.target_language = "Gujarati"
        self.translation = ""

    def _append_transcript(self, transcript: str) -> None:
        self.translate_text = f"{self.translate_text} {transcript}".strip()

    def toggle_dictation(self, recognizer: Recognizer | None) -> None:
        self.toggle_voice_input(recognizer, self._append_transcript)

    async def generate_tts(self) -> bool:
        if not self.require(self.tts_text, message="Please enter text to convert"):
            return False

        item = AudioItem(text=self.tts_text[:100], voice=self.selected_voice)
        self.audio_items.insert(0, item)

        envelope = await self.invoke(
            {"type": VoiceTask.TTS.value, "text": self.tts_text, "voice": self.selected_voice},
            failure_message="TTS generation failed",
            supersede=False,
        )
        if envelope is None:
            item.status = "error"
            return False

        item.status = "completed"
        item.audio_base64 = envelope.get("audioBase64")
        self.tts_text = ""
        self.notifier.success("Audio generated! 🔊")
        return True

    def play(self, item: AudioItem, player: AudioPlayer) -> None:
        """Toggle playback of *item*."""
        if item.data_url is None:
            return
        if self.currently_playing == item.id:
            player.pause()
            self.currently_playing = None
        else:
            player.play(item.data_url)
            self.currently_playing = item.id

    @staticmethod
    def download(item: AudioItem) -> tuple[str, bytes] | None:
        """Return ``(filename, mp3 bytes)`` for saving *item*."""
        if not item.audio_base64:
            return None
        return f"dwiju-voice-{item.id[:8]}.mp3", base64.b64decode(item.audio_base64)

    async def translate(self) -> bool:
        if not self.require(self.translate_text, message="Please enter text to translate"):
            return False

        envelope = await self.invoke(
            {
                "type": VoiceTask.TRANSLATE.value,
                "text": self.translate_text,
                "language": self.target_language,
            },
            failure_message="Translation failed",
        )
        if envelope is None:
            return False

        self.translation = envelope.get("translation") or ""
        self.notifier.success("Translation complete!")
        return True
