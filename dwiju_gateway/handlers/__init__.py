"""Capability handlers and the wiring that builds them from settings."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from dwiju_gateway.config.generation_profiles import load_generation_profiles
from dwiju_gateway.config.settings import GatewaySettings
from dwiju_gateway.handlers.base import CapabilityHandler
from dwiju_gateway.handlers.brain import BrainHandler
from dwiju_gateway.handlers.education import EducationHandler
from dwiju_gateway.handlers.live import LiveHandler
from dwiju_gateway.handlers.music import MusicHandler
from dwiju_gateway.handlers.search import SearchHandler
from dwiju_gateway.handlers.tube import VideoSearchHandler
from dwiju_gateway.handlers.vision import VisionHandler
from dwiju_gateway.handlers.voice import VoiceHandler
from dwiju_gateway.providers.gemini import GeminiClient
from dwiju_gateway.providers.music import MusicClient
from dwiju_gateway.providers.search import SearchClient
from dwiju_gateway.providers.speech import SpeechClient
from dwiju_gateway.providers.youtube import VideoSearchClient
from dwiju_gateway.templates import build_default_registry


@dataclass(frozen=True)
class CapabilityHandlers:
    brain: BrainHandler
    education: EducationHandler
    live: LiveHandler
    search: SearchHandler
    vision: VisionHandler
    voice: VoiceHandler
    tube: VideoSearchHandler
    music: MusicHandler


def build_handlers(settings: GatewaySettings, http_client: httpx.AsyncClient) -> CapabilityHandlers:
    """Construct every handler with credentials injected from *settings*."""
    timeout = settings.upstream_timeout_seconds
    profiles = load_generation_profiles(settings.generation_profiles_path)
    templates = build_default_registry()

    gemini = GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        http_client=http_client,
        timeout_seconds=timeout,
    )
    speech = SpeechClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.tts_model,
        default_voice=settings.default_voice,
        http_client=http_client,
        timeout_seconds=timeout,
    )
    search = SearchClient(
        api_key=settings.google_search_api_key,
        engine_id=settings.google_search_engine_id,
        base_url=settings.search_base_url,
        result_count=settings.search_result_count,
        http_client=http_client,
        timeout_seconds=timeout,
    )
    videos = VideoSearchClient(
        api_key=settings.youtube_api_key,
        base_url=settings.youtube_base_url,
        http_client=http_client,
        timeout_seconds=timeout,
    )
    music = MusicClient(
        api_key=settings.music_api_key,
        api_url=settings.music_api_url,
        http_client=http_client,
        timeout_seconds=timeout,
    )

    return CapabilityHandlers(
        brain=BrainHandler(gemini=gemini, templates=templates, profiles=profiles),
        education=EducationHandler(gemini=gemini, templates=templates, profiles=profiles),
        live=LiveHandler(gemini=gemini, profile=profiles["live"]),
        search=SearchHandler(search=search),
        vision=VisionHandler(gemini=gemini, templates=templates, profiles=profiles),
        voice=VoiceHandler(speech=speech, gemini=gemini, templates=templates, profiles=profiles),
        tube=VideoSearchHandler(videos=videos),
        music=MusicHandler(music=music),
    )


__all__ = [
    "BrainHandler",
    "CapabilityHandler",
    "CapabilityHandlers",
    "EducationHandler",
    "LiveHandler",
    "MusicHandler",
    "SearchHandler",
    "VideoSearchHandler",
    "VisionHandler",
    "VoiceHandler",
    "build_handlers",
]
