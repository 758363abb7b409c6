"""NPCs of the turn-based battle: elves, outlaws and squirrels."""

from __future__ import annotations

from typing import ClassVar

from npcbattle.kinds import NPCType
from npcbattle.observers import Observer

_ID_LIMIT = 1 << 16


class NPC:
    """A character on the field; each kind kills exactly one other kind."""

    npc_type: ClassVar[NPCType] = NPCType.UNKNOWN
    type_name: ClassVar[str] = ""
    prey: ClassVar[NPCType] = NPCType.UNKNOWN
    cry: ClassVar[str] = ""

    _next_id: ClassVar[int] = 0

    def __init__(self, x: int, y: int) -> None:
        if self.npc_type is NPCType.UNKNOWN:
            raise TypeError("create an Elf, an Outlaw or a Squirrel instead")
        self.name = f"{self.type_name}_{NPC._take_id()}"
        self.x = x
        self.y = y
        self.alive = True
        self.observers: list[Observer] = []

    @staticmethod
    def _take_id() -> int:
        current = NPC._next_id
        NPC._next_id = (current + 1) % _ID_LIMIT
        return current

    def __str__(self) -> str:
        return f"{self.name} {{x : {self.x}, y : {self.y}}}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x}, {self.y}) named {self.name!r}"

    def attach(self, observer: Observer) -> None:
        """Subscribe an observer to this NPC's kills."""
        self.observers.append(observer)

    def notify_killed(self, defender: NPC) -> None:
        """Tell every observer that this NPC killed ``defender``."""
        for observer in self.observers:
            observer.report_killed(self, defender)

    def near(self, enemy: NPC, distance: int) -> bool:
        """Whether ``enemy`` lies within ``distance`` of this NPC."""
        dx = self.x - enemy.x
        dy = self.y - enemy.y
        return dx * dx + dy * dy <= distance * distance

    def accept(self, visitor: NPC) -> bool:
        """Be attacked by ``visitor``; return True and die if it wins."""
        if visitor.fight(self):
            self.alive = False
            return True
        return False

    def fight(self, defender: NPC) -> bool:
        """Attack ``defender``; return True if this NPC kills it."""
        if defender.npc_type is self.prey:
            self.notify_killed(defender)
            return True
        return False

    def battle_cry(self) -> None:
        """Shout this NPC's battle cry."""
        print(self.cry)


class Elf(NPC):
    """Kills outlaws."""

    npc_type = NPCType.ELF
    type_name = "Elf"
    prey = NPCType.OUTLAW
    cry = "Shorel'aran!"


class Outlaw(NPC):
    """Kills squirrels."""

    npc_type = NPCType.OUTLAW
    type_name = "Outlaw"
    prey = NPCType.SQUIRREL
    cry = "Bar-rr-a!!!"


class Squirrel(NPC):
    """Kills elves."""

    npc_type = NPCType.SQUIRREL
    type_name = "Squirrel"
    prey = NPCType.ELF
    cry = "Barks!!!"