"""Hosted provider clients."""

from dwiju_gateway.providers.base import ProviderClient, provider_error_message
from dwiju_gateway.providers.gemini import GeminiClient, first_text, image_part, text_part
from dwiju_gateway.providers.music import MusicClient
from dwiju_gateway.providers.search import SearchClient
from dwiju_gateway.providers.speech import SpeechClient
from dwiju_gateway.providers.youtube import VideoSearchClient

__all__ = [
    "GeminiClient",
    "MusicClient",
    "ProviderClient",
    "SearchClient",
    "SpeechClient",
    "VideoSearchClient",
    "first_text",
    "image_part",
    "provider_error_message",
    "text_part",
]
