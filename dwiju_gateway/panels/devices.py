"""Device capabilities used by panels.

Speech recognition, speech synthesis, camera capture and audio playback
belong to the host environment (a browser, a desktop shell, a test double).
Panels only see these interfaces.
"""

from __future__ import annotations

from typing import Callable, Protocol


class Recognizer(Protocol):
    """Speech-to-text with start/stop and result callbacks."""

    def start(
        self,
        on_result: Callable[[str], None],
        on_error: Callable[[str], None],
        on_end: Callable[[], None],
    ) -> None: ...

    def stop(self) -> None: ...


class Synthesizer(Protocol):
    """Local text-to-speech used to read replies aloud."""

    def speak(self, text: str, lang: str = "hi-IN", rate: float = 0.9) -> None: ...

    def cancel(self) -> None: ...


class Camera(Protocol):
    """Still-frame capture; returns JPEG bytes."""

    async def capture(self) -> bytes: ...


class AudioPlayer(Protocol):
    def play(self, source: str) -> None: ...

    def pause(self) -> None: ...
