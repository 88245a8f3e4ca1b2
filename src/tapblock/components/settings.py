from __future__ import annotations

from dataclasses import dataclass

from tapblock.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    COLOR_COUNT,
    COLOR_RANGE,
    HEIGHT_RANGE,
    WIDTH_RANGE,
)

SETTING_RANGES = {
    "width": WIDTH_RANGE,
    "height": HEIGHT_RANGE,
    "colors": COLOR_RANGE,
}


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, int(value)))


@dataclass(slots=True)
class GameSettings:
    """Player-adjustable board configuration applied when the next session starts."""

    width: int = BOARD_WIDTH
    height: int = BOARD_HEIGHT
    colors: int = COLOR_COUNT

    @classmethod
    def clamped(cls, width: int, height: int, colors: int) -> "GameSettings":
        return cls(
            width=_clamp(width, WIDTH_RANGE),
            height=_clamp(height, HEIGHT_RANGE),
            colors=_clamp(colors, COLOR_RANGE),
        )

    def adjust(self, field: str, delta: int) -> bool:
        """Step ``field`` by ``delta`` within its menu range; return True if it changed."""
        bounds = SETTING_RANGES.get(field)
        if bounds is None:
            raise KeyError(f"Unknown setting: {field}")
        current = getattr(self, field)
        updated = _clamp(current + delta, bounds)
        if updated == current:
            return False
        setattr(self, field, updated)
        return True

    def as_dict(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height, "colors": self.colors}
