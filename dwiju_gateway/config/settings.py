"""Pydantic Settings for the gateway.

All environment variables use the DWIJU_ prefix.
Example: DWIJU_GEMINI_API_KEY=..., DWIJU_LOG_LEVEL=DEBUG

Provider credentials are optional: a missing key is reported by the handler
that needs it, per request, instead of failing startup.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

_DEFAULT_PROFILES_PATH = Path(__file__).with_name("generation_profiles.yaml")


class GatewaySettings(BaseSettings):
    """Gateway configuration validated from environment variables."""

    # Service
    log_level: str = "INFO"
    log_json: bool = True

    # Language model (text, vision, translation)
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash-exp"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Text to speech
    openai_api_key: str | None = None
    openai_base_url: str = "https://api.openai.com/v1"
    tts_model: str = "tts-1"
    default_voice: str = "alloy"

    # Web search
    google_search_api_key: str | None = None
    google_search_engine_id: str | None = None
    search_base_url: str = "https://www.googleapis.com/customsearch/v1"
    search_result_count: int = Field(default=10, ge=1, le=10)

    # Video search
    youtube_api_key: str | None = None
    youtube_base_url: str = "https://www.googleapis.com/youtube/v3"

    # Music generation
    music_api_key: str | None = None
    music_api_url: str | None = None

    # Outbound HTTP
    upstream_timeout_seconds: float = Field(default=60.0, gt=0)

    # Generation profiles
    generation_profiles_path: str = str(_DEFAULT_PROFILES_PATH)

    model_config = {"env_prefix": "DWIJU_"}

    def configured_providers(self) -> dict[str, bool]:
        """Report which providers have credentials, never the values."""
        return {
            "gemini": bool(self.gemini_api_key),
            "openai": bool(self.openai_api_key),
            "google_search": bool(
                self.google_search_api_key and self.google_search_engine_id
            ),
            "youtube": bool(self.youtube_api_key),
            "music": bool(self.music_api_key and self.music_api_url),
        }


class PanelSettings(BaseSettings):
    """Settings for panel controllers talking to a running gateway."""

    gateway_url: str = "http://localhost:8000"
    timeout_seconds: float = Field(default=120.0, gt=0)

    model_config = {"env_prefix": "DWIJU_PANEL_"}
