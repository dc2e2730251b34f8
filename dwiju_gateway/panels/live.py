"""Live chat panel: conversation history, camera frames, spoken replies."""

from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from dwiju_gateway.models.requests import Capability
from dwiju_gateway.panels.base import Panel, VoiceInputMixin, is_blank
from dwiju_gateway.panels.devices import Camera, Recognizer, Synthesizer
from dwiju_gateway.templates.live import IMAGE_ONLY_PROMPT


@dataclass
class ChatTurn:
    role: str  # "user" | "assistant"
    content: str
    image_base64: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class LiveChatPanel(VoiceInputMixin, Panel):
    capability = Capability.LIVE

    def __init__(self, *args, synthesizer: Synthesizer | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.synthesizer = synthesizer
        self.input = ""
        self.captured_image: str | None = None
        self.messages: list[ChatTurn] = []
        self.speaking = False

    def _set_input(self, transcript: str) -> None:
        self.input = transcript

    def toggle_voice_input_for_chat(self, recognizer: Recognizer | None) -> None:
        self.toggle_voice_input(recognizer, self._set_input)

    async def capture_image(self, camera: Camera | None) -> bool:
        if camera is None:
            self.notifier.error("Could not access camera")
            return False
        try:
            frame = await camera.capture()
        except OSError:
            self.notifier.error("Could not access camera")
            return False
        self.captured_image = base64.b64encode(frame).decode("ascii")
        self.notifier.success("Image captured! Send your message.")
        return True

    def speak(self, text: str) -> None:
        if self.synthesizer is None:
            return
        self.synthesizer.cancel()
        self.synthesizer.speak(text, lang="hi-IN", rate=0.9)
        self.speaking = True

    def stop_speaking(self) -> None:
        if self.synthesizer is not None:
            self.synthesizer.cancel()
        self.speaking = False

    async def send(self, recognizer: Recognizer | None = None) -> bool:
        if is_blank(self.input) and not self.captured_image:
            self.notifier.error("Please type a message or capture an image")
            return False

        image = self.captured_image
        user_turn = ChatTurn(
            role="user",
            content=self.input or IMAGE_ONLY_PROMPT,
            image_base64=image,
        )
        self.messages.append(user_turn)
        self.input = ""

        if self.listening and recognizer is not None:
            recognizer.stop()
            self.listening = False

        envelope = await self.invoke(
            {
                "messages": [{"role": m.role, "content": m.content} for m in self.messages],
                "imageBase64": image,
            },
            failure_message="Failed to get response",
        )
        if envelope is None:
            return False

        reply = envelope.get("response") or ""
        self.messages.append(ChatTurn(role="assistant", content=reply))
        self.captured_image = None
        self.speak(reply)
        return True
