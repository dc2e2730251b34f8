"""Reasoning panel: math, logic, code, explain, analyze."""

from __future__ import annotations

from dwiju_gateway.models.requests import BrainTask, Capability
from dwiju_gateway.panels.base import Panel


class BrainPanel(Panel):
    capability = Capability.BRAIN

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.problem = ""
        self.topic = ""
        self.code_language = "python"
        self.result = ""

    async def process(self, task: BrainTask | str) -> bool:
        if not self.require(self.problem, self.topic, message="Please enter a problem or topic"):
            return False

        envelope = await self.invoke(
            {
                "type": BrainTask(task).value,
                "problem": self.problem or self.topic,
                "topic": self.topic,
                "language": self.code_language,
            },
            failure_message="Processing failed",
        )
        if envelope is None:
            return False

        self.result = envelope.get("result") or ""
        self.notifier.success("Solution ready! 🧠")
        return True
