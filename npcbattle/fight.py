"""A queue of fights, worked off by a background thread."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass
from typing import ClassVar

from npcbattle.live import NPC

IDLE_WAIT = 0.1


@dataclass(frozen=True)
class FightEvent:
    """One NPC attacking another."""

    attacker: NPC
    defender: NPC


class FightManager:
    """Holds pending fights and resolves them one at a time."""

    _instance: ClassVar[FightManager | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._events: deque[FightEvent] = deque()
        self._lock = threading.Lock()

    @classmethod
    def get(cls) -> FightManager:
        """The manager shared by the whole program."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

    def add_event(self, event: FightEvent) -> None:
        """Queue a fight."""
        with self._lock:
            self._events.append(event)

    def process_next(self) -> bool:
        """Resolve the oldest queued fight; False if none was queued.

        A fight in which either side is already dead is dropped.
        """
        with self._lock:
            if not self._events:
                return False
            event = self._events.popleft()
        if event.attacker.alive and event.defender.alive:
            event.defender.accept(event.attacker)
        return True

    def run(self, stop: threading.Event) -> None:
        """Resolve fights until ``stop`` is set, pausing when idle."""
        while not stop.is_set():
            if not self.process_next():
                stop.wait(IDLE_WAIT)