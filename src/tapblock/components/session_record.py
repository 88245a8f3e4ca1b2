from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping


@dataclass(slots=True)
class SessionRecord:
    """Summary of one play session as stored in the session log."""

    start_time: float
    width: int
    height: int
    colors: int
    end_time: float | None = None
    final_score: int | None = None

    @property
    def finished(self) -> bool:
        return self.end_time is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "SessionRecord":
        end_time = payload.get("end_time")
        final_score = payload.get("final_score")
        return cls(
            start_time=float(payload["start_time"]),
            width=int(payload["width"]),
            height=int(payload["height"]),
            colors=int(payload["colors"]),
            end_time=float(end_time) if end_time is not None else None,
            final_score=int(final_score) if final_score is not None else None,
        )
