"""Generation profile models and YAML loader.

A generation profile holds the sampling parameters sent with every language
model call of one capability. Built-in profiles can be overridden from a YAML
file keyed by profile name.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class GenerationProfile(BaseModel):
    """Sampling parameters for one capability."""

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_k: int | None = Field(default=None, ge=1)
    top_p: float | None = Field(default=None, gt=0.0, le=1.0)
    max_output_tokens: int = Field(default=4096, ge=1)

    def to_generation_config(self) -> dict:
        """Render the provider's camelCase ``generationConfig`` object."""
        config: dict = {
            "temperature": self.temperature,
            "maxOutputTokens": self.max_output_tokens,
        }
        if self.top_k is not None:
            config["topK"] = self.top_k
        if self.top_p is not None:
            config["topP"] = self.top_p
        return config


DEFAULT_PROFILES: dict[str, GenerationProfile] = {
    "brain": GenerationProfile(temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=8192),
    "education": GenerationProfile(temperature=0.7, top_k=40, top_p=0.95, max_output_tokens=4096),
    "live": GenerationProfile(temperature=0.9, top_k=40, top_p=0.95, max_output_tokens=8192),
    "vision": GenerationProfile(temperature=0.4, top_k=32, top_p=0.95, max_output_tokens=4096),
    "translate": GenerationProfile(temperature=0.3, max_output_tokens=2048),
}


def load_generation_profiles(yaml_path: str) -> dict[str, GenerationProfile]:
    """Parse a generation profiles YAML file on top of the built-in profiles.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        A dict mapping profile names to GenerationProfile instances. Profiles
        missing from the file (or the whole file, if absent or malformed)
        keep their built-in values.
    """
    profiles = dict(DEFAULT_PROFILES)
    path = Path(yaml_path)

    if not path.exists():
        logger.warning("Generation profiles file not found at %s, using built-in defaults", yaml_path)
        return profiles

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("Failed to parse generation profiles YAML at %s: %s", yaml_path, exc)
        return profiles

    if not isinstance(raw, dict) or not isinstance(raw.get("profiles"), dict):
        logger.warning("Generation profiles YAML missing 'profiles' key, using built-in defaults")
        return profiles

    for name, config in raw["profiles"].items():
        try:
            profiles[name] = GenerationProfile.model_validate(config)
        except Exception as exc:
            logger.error("Invalid generation profile '%s': %s, skipping", name, exc)

    return profiles
