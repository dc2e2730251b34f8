"""Image analysis panel."""

from __future__ import annotations

import base64

from dwiju_gateway.models.requests import Capability, VisionTask
from dwiju_gateway.panels.base import Panel
from dwiju_gateway.panels.devices import Camera


class VisionPanel(Panel):
    capability = Capability.VISION

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.image_base64: str | None = None
        self.custom_prompt = ""
        self.result = ""

    def load_image(self, data: bytes) -> None:
        """Use uploaded image bytes."""
        self.image_base64 = base64.b64encode(data).decode("ascii")
        self.notifier.success("Image loaded!")

    async def capture(self, camera: Camera | None) -> bool:
        if camera is None:
            self.notifier.error("Could not access camera")
            return False
        try:
            frame = await camera.capture()
        except OSError:
            self.notifier.error("Could not access camera")
            return False
        self.image_base64 = base64.b64encode(frame).decode("ascii")
        self.notifier.success("Image captured!")
        return True

    def clear_image(self) -> None:
        self.image_base64 = None
        self.result = ""

    async def process(self, task: VisionTask | str) -> bool:
        if not self.require(self.image_base64, message="Please upload or capture an image first"):
            return False

        payload: dict = {"imageBase64": self.image_base64, "type": VisionTask(task).value}
        if self.custom_prompt:
            payload["prompt"] = self.custom_prompt

        envelope = await self.invoke(payload, failure_message="Analysis failed")
        if envelope is None:
            return False

        self.result = envelope.get("result") or ""
        self.notifier.success("Analysis complete!")
        return True
