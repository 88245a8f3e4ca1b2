from __future__ import annotations

from typing import Any, Dict

from tapblock.events.bus import (
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_PRESS_RAW,
    EVENT_MOUSE_RELEASE,
    EVENT_MOUSE_RELEASE_RAW,
    EventBus,
)
from tapblock.utils.input_throttle import MouseThrottle


class MouseThrottleSystem:
    """Bridges raw mouse presses and releases to de-bounced events shared by all systems.

    Presses and releases are throttled independently so the release that
    completes a click is never mistaken for a repeat of its press.
    """

    def __init__(
        self,
        event_bus: EventBus,
        *,
        press_throttle: MouseThrottle | None = None,
        release_throttle: MouseThrottle | None = None,
    ) -> None:
        self.event_bus = event_bus
        self._routes: Dict[str, tuple[str, MouseThrottle]] = {
            EVENT_MOUSE_PRESS_RAW: (EVENT_MOUSE_PRESS, press_throttle or MouseThrottle()),
            EVENT_MOUSE_RELEASE_RAW: (EVENT_MOUSE_RELEASE, release_throttle or MouseThrottle()),
        }
        self.event_bus.subscribe(EVENT_MOUSE_PRESS_RAW, self._on_press_raw)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE_RAW, self._on_release_raw)

    @property
    def press_throttle(self) -> MouseThrottle:
        return self._routes[EVENT_MOUSE_PRESS_RAW][1]

    @property
    def release_throttle(self) -> MouseThrottle:
        return self._routes[EVENT_MOUSE_RELEASE_RAW][1]

    def _on_press_raw(self, sender: Any, **payload: Any) -> None:
        self._forward(EVENT_MOUSE_PRESS_RAW, payload)

    def _on_release_raw(self, sender: Any, **payload: Any) -> None:
        self._forward(EVENT_MOUSE_RELEASE_RAW, payload)

    def _forward(self, raw_name: str, payload: Dict[str, Any]) -> None:
        x = payload.get("x")
        y = payload.get("y")
        button = payload.get("button")
        if x is None or y is None or button is None:
            return
        try:
            xf = float(x)
            yf = float(y)
            button_int = int(button)
        except (TypeError, ValueError):
            return
        name, throttle = self._routes[raw_name]
        if not throttle.allow(xf, yf, button_int):
            return
        sanitized = dict(payload)
        sanitized["x"] = xf
        sanitized["y"] = yf
        sanitized["button"] = button_int
        sanitized.setdefault("press_id", throttle.last_sequence)
        self.event_bus.emit(name, **sanitized)
