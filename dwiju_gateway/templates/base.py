"""Prompt template definition.

A template belongs to one capability and one discriminator value. It pairs
the persona sent as the system instruction with a renderer that interpolates
request fields into the user instruction. A template whose ``task`` is
``None`` is the capability's fallback for absent or unknown discriminators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from dwiju_gateway.models.requests import Capability


@dataclass(frozen=True)
class PromptTemplate:
    capability: Capability
    task: str | None
    render: Callable[[Any], str]
    system_instruction: str | None = None
    profile: str | None = None  # generation profile name; defaults to the capability

    @property
    def profile_name(self) -> str:
        return self.profile or self.capability.value

    def build(self, request: Any) -> str:
        return self.render(request)
