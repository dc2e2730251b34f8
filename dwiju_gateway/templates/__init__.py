"""Prompt templates per capability and the registry that selects them."""

from dwiju_gateway.templates.base import PromptTemplate
from dwiju_gateway.templates.brain import BRAIN_TEMPLATES
from dwiju_gateway.templates.education import EDUCATION_TEMPLATES, STRUCTURED_TASKS
from dwiju_gateway.templates.live import IMAGE_ONLY_PROMPT, LIVE_PERSONA
from dwiju_gateway.templates.registry import TemplateRegistry
from dwiju_gateway.templates.vision import VISION_TEMPLATES
from dwiju_gateway.templates.voice import VOICE_TEMPLATES


def build_default_registry() -> TemplateRegistry:
    """Registry holding every built-in template."""
    registry = TemplateRegistry()
    for template in (
        *BRAIN_TEMPLATES,
        *EDUCATION_TEMPLATES,
        *VISION_TEMPLATES,
        *VOICE_TEMPLATES,
    ):
        registry.register(template)
    return registry


__all__ = [
    "IMAGE_ONLY_PROMPT",
    "LIVE_PERSONA",
    "PromptTemplate",
    "STRUCTURED_TASKS",
    "TemplateRegistry",
    "build_default_registry",
]
