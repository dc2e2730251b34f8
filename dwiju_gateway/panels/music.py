"""Music generation panel."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

from dwiju_gateway.models.requests import Capability
from dwiju_gateway.panels.base import Panel
from dwiju_gateway.panels.devices import AudioPlayer

GENRES = (
    "pop",
    "rock",
    "electronic",
    "classical",
    "jazz",
    "hip-hop",
    "folk",
    "bollywood",
    "ambient",
    "cinematic",
)


@dataclass
class Song:
    title: str
    genre: str
    prompt: str
    status: str = "generating"  # generating | completed | error
    audio_url: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


class MusicPanel(Panel):
    capability = Capability.MUSIC

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.prompt = ""
        self.lyrics = ""
        self.genre = "pop"
        self.duration = 30
        self.instrumental = False
        self.songs: list[Song] = []
        self.currently_playing: str | None = None

    def full_prompt(self) -> str:
        if self.lyrics:
            return f"{self.prompt}\n\nLyrics:\n{self.lyrics}"
        return self.prompt

    async def generate(self) -> bool:
        if not self.require(self.prompt, message="Please describe the song you want"):
            return False

        song = Song(title=self.prompt[:50], genre=self.genre, prompt=self.prompt)
        self.songs.insert(0, song)

        envelope = await self.invoke(
            {
                "prompt": self.full_prompt(),
                "style": self.genre,
                "duration": self.duration,
                "instrumental": self.instrumental,
            },
            failure_message="",
            supersede=False,
        )
        if envelope is None:
            song.status = "error"
            return False

        data = envelope.get("data") or {}
        song.status = "completed"
        song.audio_url = data.get("audio_url") or data.get("url")
        self.prompt = ""
        self.lyrics = ""
        self.notifier.success("🎵 Song generated successfully!")
        return True

    def play(self, song: Song, player: AudioPlayer) -> None:
        if not song.audio_url:
            return
        if self.currently_playing == song.id:
            player.pause()
            self.currently_playing = None
        else:
            player.play(song.audio_url)
            self.currently_playing = song.id
