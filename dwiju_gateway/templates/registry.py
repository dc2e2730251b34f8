"""Prompt template registry.

Maps ``(Capability, task)`` → ``PromptTemplate``. The discriminator alone
selects the template; content is never inspected. Adding a task only
requires registering another template.
"""

from __future__ import annotations

import logging

from dwiju_gateway.models.requests import Capability
from dwiju_gateway.templates.base import PromptTemplate

logger = logging.getLogger(__name__)


class TemplateRegistry:
    """Registry that maps capability tasks to their prompt templates."""

    def __init__(self) -> None:
        self._templates: dict[tuple[Capability, str | None], PromptTemplate] = {}

    def register(self, template: PromptTemplate) -> None:
        """Register *template* under its capability and task.

        Raises
        ------
        ValueError
            If a template for the same capability and task is already registered.
        """
        key = (template.capability, template.task)
        if key in self._templates:
            raise ValueError(
                f"Template for '{template.capability.value}/{template.task}' is already registered"
            )
        self._templates[key] = template
        logger.debug(
            "Registered template '%s/%s'", template.capability.value, template.task
        )

    def get(self, capability: Capability, task: str | None) -> PromptTemplate:
        """Return the template for *task*, or the capability's fallback.

        Raises
        ------
        KeyError
            If neither the task nor a fallback is registered.
        """
        template = self._templates.get((capability, task))
        if template is None:
            template = self._templates.get((capability, None))
        if template is None:
            raise KeyError(
                f"No template registered for '{capability.value}/{task}'"
            )
        return template

    def list_tasks(self, capability: Capability) -> list[str]:
        """Return the named tasks registered for *capability*."""
        return [
            task
            for (cap, task) in self._templates
            if cap is capability and task is not None
        ]
