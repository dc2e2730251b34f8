"""Configuration module — settings and generation profiles."""

from dwiju_gateway.config.generation_profiles import (
    DEFAULT_PROFILES,
    GenerationProfile,
    load_generation_profiles,
)
from dwiju_gateway.config.settings import GatewaySettings, PanelSettings

__all__ = [
    "DEFAULT_PROFILES",
    "GatewaySettings",
    "GenerationProfile",
    "PanelSettings",
    "load_generation_profiles",
]
