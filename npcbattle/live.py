"""NPCs of the real-time battle: they move, have energy and damage ranges."""

from __future__ import annotations

import math
import random
import sys
import threading
from typing import ClassVar

from npcbattle.kinds import NPCType
from npcbattle.observers import Observer

_ID_LIMIT = 1 << 16


class NPC:
    """A character that wanders the field; each kind hunts exactly one other kind.

    Position and liveness are guarded by a per-NPC lock, so an NPC may be
    moved, inspected and attacked from several threads at once.
    """

    npc_type: ClassVar[NPCType] = NPCType.UNKNOWN
    type_name: ClassVar[str] = ""
    prey: ClassVar[NPCType] = NPCType.UNKNOWN
    cry: ClassVar[str] = ""
    damage_range: ClassVar[int] = 0
    step: ClassVar[int] = 0

    _next_id: ClassVar[int] = 0
    _id_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, x: int, y: int, rng: random.Random | None = None) -> None:
        if self.npc_type is NPCType.UNKNOWN:
            raise TypeError("create an Elf, an Outlaw or a Squirrel instead")
        self.name = f"{self.type_name}_{NPC._take_id()}"
        self._x = x
        self._y = y
        self._alive = True
        self._observers: list[Observer] = []
        self._lock = threading.RLock()
        self._rng = rng if rng is not None else random.Random()

    @staticmethod
    def _take_id() -> int:
        with NPC._id_lock:
            current = NPC._next_id
            NPC._next_id = (current + 1) % _ID_LIMIT
            return current

    @property
    def x(self) -> int:
        with self._lock:
            return self._x

    @property
    def y(self) -> int:
        with self._lock:
            return self._y

    @property
    def position(self) -> tuple[int, int]:
        """Both coordinates, read together."""
        with self._lock:
            return self._x, self._y

    @property
    def alive(self) -> bool:
        with self._lock:
            return self._alive

    @property
    def observers(self) -> tuple[Observer, ...]:
        with self._lock:
            return tuple(self._observers)

    def __str__(self) -> str:
        x, y = self.position
        return f"{self.name} {{x : {x}, y : {y}}}"

    def __repr__(self) -> str:
        x, y = self.position
        return f"{type(self).__name__}({x}, {y}) named {self.name!r}"

    def energy(self) -> int:
        """Roll this NPC's strength for one fight: 1 to 6."""
        return self._rng.randrange(6) + 1

    def attach(self, observer: Observer) -> None:
        """Subscribe an observer to this NPC's kills."""
        with self._lock:
            self._observers.append(observer)

    def notify_killed(self, defender: NPC) -> None:
        """Tell every observer that this NPC killed ``defender``."""
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer.report_killed(self, defender)

    def near(self, enemy: NPC, distance: int) -> bool:
        """Whether ``enemy`` lies within ``distance`` of this NPC."""
        ex, ey = enemy.position
        x, y = self.position
        dx = x - ex
        dy = y - ey
        return dx * dx + dy * dy <= distance * distance

    def must_die(self) -> None:
        """Mark this NPC as dead."""
        with self._lock:
            self._alive = False

    def move(self, max_x: int, max_y: int) -> None:
        """Take a random step, staying inside [0, max_x] x [0, max_y]."""
        with self._lock:
            angle = self._rng.randrange(100) / 100.0 * 2 * math.pi
            dist = self._rng.randrange(100) / 100.0 * self.step
            shift_x = int(dist * math.cos(angle))
            shift_y = int(dist * math.sin(angle))
            if 0 <= self._x + shift_x <= max_x:
                self._x += shift_x
            if 0 <= self._y + shift_y <= max_y:
                self._y += shift_y

    def accept(self, visitor: NPC) -> bool:
        """Be attacked by ``visitor``; True if it is the kind that hunts us."""
        return visitor.fight(self)

    def fight(self, defender: NPC) -> bool:
        """Attack ``defender`` if it is our prey; kill it on higher energy.

        Returns True whenever a fight took place, whatever its outcome.
        """
        if defender.npc_type is not self.prey:
            return False
        if self.energy() > defender.energy():
            self.notify_killed(defender)
            defender.must_die()
        return True

    def battle_cry(self) -> str:
        """Shout this NPC's battle cry on standard output and return it."""
        line = f"{self.cry}\n"
        sys.stdout.write(line)
        sys.stdout.flush()
        return self.cry


class Elf(NPC):
    """Hunts outlaws."""

    npc_type = NPCType.ELF
    type_name = "Elf"
    prey = NPCType.OUTLAW
    cry = "Shorel'aran!"
    damage_range = 50
    step = 10


class Outlaw(NPC):
    """Hunts squirrels."""

    npc_type = NPCType.OUTLAW
    type_name = "Outlaw"
    prey = NPCType.SQUIRREL
    cry = "Bar-rr-a!!!"
    damage_range = 10
    step = 10


class Squirrel(NPC):
    """Hunts elves."""

    npc_type = NPCType.SQUIRREL
    type_name = "Squirrel"
    prey = NPCType.ELF
    cry = "Barks!!!"
    damage_range = 5
    step = 5