"""Panel base class.

A panel holds the transient state of one feature and turns a user action
into exactly one gateway call:

1. guard: an empty primary field shows a notification and sends nothing;
2. busy: set while the latest call is in flight;
3. success: the subclass applies the payload to its state;
4. failure: an error notification, earlier state left untouched.

Every call takes the next value of a per-panel token. When an answer
arrives after a newer call was issued, it is dropped, so a slow response
can never overwrite a fresher one.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from dwiju_gateway.models.requests import Capability
from dwiju_gateway.panels.client import GatewayCallError, GatewayClient
from dwiju_gateway.panels.devices import Recognizer
from dwiju_gateway.panels.notifier import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)


def is_blank(value: str | None) -> bool:
    return not value or not value.strip()


class Panel:
    capability: Capability

    def __init__(self, client: GatewayClient, notifier: Notifier | None = None) -> None:
        self._client = client
        self.notifier: Notifier = notifier or LoggingNotifier()
        self.busy = False
        self.last_error: str | None = None
        self._issued = 0
        self._in_flight = 0

    @property
    def latest_token(self) -> int:
        return self._issued

    def require(self, *values: str | None, message: str) -> bool:
        """True if any of *values* is non-blank; notify otherwise."""
        if all(is_blank(value) for value in values):
            self.notifier.error(message)
            return False
        return True

    async def invoke(
        self,
        payload: dict[str, Any],
        *,
        failure_message: str,
        supersede: bool = True,
    ) -> dict[str, Any] | None:
        """Call the gateway; return the envelope, or ``None`` on failure or staleness.

        With ``supersede=False`` the answer is kept even if newer calls were
        issued; panels that append one list entry per call use this.
        """
        self._issued += 1
        token = self._issued
        self._in_flight += 1
        self.busy = True

        try:
            envelope = await self._client.call(self.capability, payload)
        except GatewayCallError as exc:
            if supersede and token != self._issued:
                logger.debug("Dropping stale %s failure (token %d)", self.capability.value, token)
                return None
            logger.warning("%s call failed: %s", self.capability.value, exc)
            self.last_error = str(exc)
            self.notifier.error(failure_message or str(exc))
            return None
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self.busy = False

        if supersede and token != self._issued:
            logger.debug("Dropping stale %s response (token %d)", self.capability.value, token)
            return None
        self.last_error = None
        return envelope


class VoiceInputMixin:
    """Fill a text field from speech recognition."""

    notifier: Notifier
    listening: bool = False

    def toggle_voice_input(
        self,
        recognizer: Recognizer | None,
        apply: Callable[[str], None],
        prompt: str = "Listening... Speak now",
        unsupported: str = "Speech recognition not supported",
    ) -> None:
        if recognizer is None:
            self.notifier.error(unsupported)
            return

        if self.listening:
            recognizer.stop()
            self.listening = False
            return

        def on_result(transcript: str) -> None:
            apply(transcript)
            self.notifier.success("Voice captured!")

        def on_error(_reason: str) -> None:
            self.listening = False
            self.notifier.error("Voice recognition failed")

        def on_end() -> None:
            self.listening = False

        recognizer.start(on_result, on_error, on_end)
        self.listening = True
        self.notifier.info(prompt)
