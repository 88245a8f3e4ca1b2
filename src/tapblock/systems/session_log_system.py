from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Callable, List

from esper import World

from tapblock.components.session_record import SessionRecord
from tapblock.components.settings import GameSettings
from tapblock.constants import SESSION_LOG_PATH
from tapblock.events.bus import (
    EVENT_GAME_OVER,
    EVENT_SESSION_STARTED,
    EventBus,
)
from tapblock.utils.game_state import get_settings

logger = logging.getLogger(__name__)


class SessionLogSystem:
    """Keeps a flat JSON log of past game summaries.

    Persistence problems are logged and otherwise ignored; they never reach gameplay.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        save_path: Path | None = None,
        clock: Callable[[], float] | None = None,
        load_existing: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._save_path = Path(save_path) if save_path is not None else SESSION_LOG_PATH
        self._clock = clock or time.time
        self._records: List[SessionRecord] = []

        self.event_bus.subscribe(EVENT_SESSION_STARTED, self._on_session_started)
        self.event_bus.subscribe(EVENT_GAME_OVER, self._on_game_over)

        if load_existing:
            self.load()
            self._seed_settings()

    @property
    def save_path(self) -> Path:
        return self._save_path

    def entries(self) -> List[SessionRecord]:
        return list(self._records)

    def last_record(self) -> SessionRecord | None:
        return self._records[-1] if self._records else None

    def best_score(self, width: int, height: int, colors: int) -> int | None:
        """Lowest final score among finished sessions with this board configuration."""
        scores = [
            record.final_score
            for record in self._records
            if record.final_score is not None
            and (record.width, record.height, record.colors) == (width, height, colors)
        ]
        return min(scores) if scores else None

    def load(self) -> None:
        self._records = load_session_log(self._save_path)

    def save(self) -> None:
        try:
            self._save_path.parent.mkdir(parents=True, exist_ok=True)
            with self._save_path.open("w", encoding="utf-8") as handle:
                json.dump([record.to_dict() for record in self._records], handle, indent=2)
        except OSError as exc:
            logger.warning("Could not write session log %s: %s", self._save_path, exc)

    def _seed_settings(self) -> None:
        last = self.last_record()
        if last is None:
            return
        seeded = GameSettings.clamped(last.width, last.height, last.colors)
        settings = get_settings(self.world)
        settings.width = seeded.width
        settings.height = seeded.height
        settings.colors = seeded.colors

    # Event handlers -----------------------------------------------------

    def _on_session_started(self, sender, **payload) -> None:
        try:
            record = SessionRecord(
                start_time=self._clock(),
                width=int(payload["width"]),
                height=int(payload["height"]),
                colors=int(payload["colors"]),
            )
        except (KeyError, TypeError, ValueError):
            return
        self._records.append(record)
        self.save()

    def _on_game_over(self, sender, **payload) -> None:
        score = payload.get("score")
        if score is None:
            return
        for record in reversed(self._records):
            if not record.finished:
                record.end_time = self._clock()
                record.final_score = int(score)
                self.save()
                return
        logger.debug("Game over without an open session record")


def load_session_log(path: Path) -> List[SessionRecord]:
    """Read a session log file; unreadable or malformed logs yield an empty list."""
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError:
        return []
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable session log %s: %s", path, exc)
        return []
    if not isinstance(payload, list):
        logger.warning("Ignoring session log %s: expected a list of sessions", path)
        return []
    records: List[SessionRecord] = []
    for entry in payload:
        try:
            records.append(SessionRecord.from_dict(entry))
        except (KeyError, TypeError, ValueError, AttributeError):
            logger.warning("Skipping malformed session entry: %r", entry)
    return records
