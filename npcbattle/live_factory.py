"""Creating, saving and loading NPCs of the real-time battle."""

from __future__ import annotations

import random
from collections.abc import Iterable
from pathlib import Path

from npcbattle.kinds import NPCType
from npcbattle.live import NPC, Elf, Outlaw, Squirrel
from npcbattle.observers import Observer

_BY_TYPE: dict[NPCType, type[NPC]] = {
    NPCType.ELF: Elf,
    NPCType.OUTLAW: Outlaw,
    NPCType.SQUIRREL: Squirrel,
}
_BY_NAME: dict[str, type[NPC]] = {cls.type_name: cls for cls in _BY_TYPE.values()}


class NPCFactory:
    """Makes moving NPCs and stores them in a plain text file.

    Every NPC made here draws its random numbers from the factory's generator.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def create_npc(self, npc_type: NPCType, x: int, y: int) -> NPC:
        """Create an NPC of the given kind at (x, y)."""
        try:
            cls = _BY_TYPE[npc_type]
        except KeyError:
            raise ValueError(f"cannot create an NPC of type {npc_type!r}") from None
        return cls(x, y, rng=self.rng)

    def save(self, npcs: Iterable[NPC], file_name: str | Path) -> None:
        """Write the count, then type, x and y of each NPC, one per line."""
        npcs = list(npcs)
        lines = [str(len(npcs))]
        for npc in npcs:
            x, y = npc.position
            lines.extend((npc.type_name, str(x), str(y)))
        with open(file_name, "w", encoding="utf-8") as out:
            out.write("\n".join(lines) + "\n")

    def load(
        self,
        file_name: str | Path,
        observers: Iterable[Observer] | None = None,
    ) -> list[NPC]:
        """Read NPCs written by :meth:`save`; a missing file yields none."""
        observers = list(observers or ())
        try:
            with open(file_name, encoding="utf-8") as source:
                tokens = source.read().split()
        except OSError:
            return []
        if not tokens:
            return []

        words = iter(tokens)
        result = []
        try:
            count = int(next(words))
            for _ in range(count):
                type_name = next(words)
                try:
                    cls = _BY_NAME[type_name]
                except KeyError:
                    raise ValueError(f"unknown NPC type {type_name!r}") from None
                x = int(next(words))
                y = int(next(words))
                npc = cls(x, y, rng=self.rng)
                for observer in observers:
                    npc.attach(observer)
                result.append(npc)
        except StopIteration:
            raise ValueError(f"{file_name} ends before all NPCs are read") from None
        return result