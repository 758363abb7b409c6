"""Turn-based battle: NPCs fight at ever growing distances."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

from npcbattle.classic import NPC
from npcbattle.classic_factory import NPCFactory
from npcbattle.kinds import NPCType
from npcbattle.observers import ConsoleObserver, LogObserver, Observer

FIELD_SIZE = 500
NPC_COUNT = 100
DISTANCE_STEP = 50
MAX_DISTANCE = 500


def generate_npcs(
    factory: NPCFactory,
    count: int,
    rng: random.Random,
    observers: Iterable[Observer] = (),
) -> list[NPC]:
    """Create ``count`` random NPCs on the field with the observers attached."""
    observers = list(observers)
    npcs = []
    for _ in range(count):
        npc = factory.create_npc(
            NPCType(rng.randrange(3) + 1),
            rng.randrange(FIELD_SIZE) + 1,
            rng.randrange(FIELD_SIZE) + 1,
        )
        for observer in observers:
            npc.attach(observer)
        npcs.append(npc)
    return npcs


def battle(npcs: Iterable[NPC], out: TextIO) -> list[NPC]:
    """Run the rounds of the battle and return the survivors."""
    survivors = list(npcs)
    for distance in range(DISTANCE_STEP, MAX_DISTANCE + 1, DISTANCE_STEP):
        if not survivors:
            break
        out.write(f"distance: {distance}\n")
        killed = []
        for attacker in survivors:
            for defender in survivors:
                if (
                    attacker is not defender
                    and attacker.alive
                    and defender.alive
                    and attacker.near(defender, distance)
                    and defender.accept(attacker)
                ):
                    killed.append(defender)
        survivors = [npc for npc in survivors if npc.alive]
        out.write(f"-> killed: {len(killed)}\n\n")
    return survivors


def _write_list(out: TextIO, npcs: Iterable[NPC]) -> None:
    for npc in npcs:
        out.write(f"{npc}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Turn-based NPC battle.")
    parser.add_argument("--count", type=int, default=NPC_COUNT)
    parser.add_argument("--data", default="game_data/npc.txt")
    parser.add_argument("--log", default="logs/battle_logs.log")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    out = sys.stdout
    data_path = Path(args.data)
    log_path = Path(args.log)
    data_path.parent.mkdir(parents=True, exist_ok=True)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    factory = NPCFactory()
    rng = random.Random(args.seed)
    with LogObserver(log_path) as log_observer:
        observers = [ConsoleObserver(out), log_observer]

        out.write("Generating ...\n\n")
        npcs = generate_npcs(factory, args.count, rng, observers)

        out.write("Saving ...\n\n")
        factory.save(npcs, data_path)

        out.write("Loading ...\n\n")
        npcs = factory.load(data_path, observers)

        out.write("Warriors list:\n")
        _write_list(out, npcs)
        out.write("\n")

        out.write("Fighting ...\n\n")
        out.write("Battle stats " + "_" * 54 + "\n\n")
        survivors = battle(npcs, out)
        out.write("_" * 68 + "\n\n")

        out.write("Survivors:\n")
        _write_list(out, survivors)
        out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())