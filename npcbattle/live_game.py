"""Real-time battle: NPCs wander the field while fights are resolved."""

from __future__ import annotations

import argparse
import random
import sys
import threading
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from npcbattle.fight import FightEvent, FightManager
from npcbattle.kinds import NPCType
from npcbattle.live import NPC
from npcbattle.live_factory import NPCFactory
from npcbattle.observers import ConsoleObserver, LogObserver

MAX_X = 100
MAX_Y = 100
NPC_COUNT = 50
GRID = 20
RUN_SECONDS = 30

_CODES = {NPCType.ELF: "El", NPCType.OUTLAW: "Ot", NPCType.SQUIRREL: "Sq"}


def _cell(text: str) -> str:
    if text == "0":
        return "[  ]"
    if len(text) == 1:
        return f"[ {text}]"
    return f"[{text}]"


def render_map(npcs: Iterable[NPC], total: int, grid: int = GRID) -> str:
    """Draw the field as a grid of cells with a survivor count on top.

    A cell shows the kind of a lone living NPC, the number of living NPCs
    when there are several, and a dot where only the dead lie.
    """
    cell_size = MAX_X // grid
    cells = [["0"] * grid for _ in range(grid)]
    survived = 0
    for npc in npcs:
        x, y = npc.position
        row, col = x // cell_size, y // cell_size
        current = cells[row][col]
        if npc.alive:
            survived += 1
            if current in ("0", "."):
                cells[row][col] = _CODES[npc.npc_type]
            elif current in _CODES.values():
                cells[row][col] = "2"
            else:
                cells[row][col] = str(int(current) + 1)
        elif current == "0":
            cells[row][col] = "."

    lines = [f"Survived: {survived} | Killed: {total - survived}"]
    lines.extend("".join(_cell(text) for text in row) for row in cells)
    return "\n".join(lines) + "\n"


def schedule_fights(npcs: Sequence[NPC], manager: FightManager) -> int:
    """Queue a fight for every living pair in range; return how many."""
    scheduled = 0
    for attacker in npcs:
        for defender in npcs:
            if (
                attacker is not defender
                and attacker.alive
                and defender.alive
                and attacker.near(defender, defender.damage_range)
            ):
                manager.add_event(FightEvent(attacker=attacker, defender=defender))
                scheduled += 1
    return scheduled


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Real-time NPC battle.")
    parser.add_argument("--count", type=int, default=NPC_COUNT)
    parser.add_argument("--data", default="game_data/npc.txt")
    parser.add_argument("--log", default="logs/battle_logs.txt")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--seconds", type=int, default=RUN_SECONDS)
    parser.add_argument("--tick", type=float, default=1.0)
    args = parser.parse_args(argv)

    out = sys.stdout
    data_path = Path(args.data)
    log_path = Path(args.log)
    data_path.parent.mkdir(parents=True, exist_ok=True)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    rng = random.Random(args.seed)
    factory = NPCFactory(rng)
    with LogObserver(log_path) as log_observer:
        observers = [ConsoleObserver(out), log_observer]

        out.write("Generating ...\n\n")
        npcs = []
        for _ in range(args.count):
            npc = factory.create_npc(
                NPCType(rng.randrange(3) + 1),
                rng.randrange(MAX_X),
                rng.randrange(MAX_Y),
            )
            for observer in observers:
                npc.attach(observer)
            npcs.append(npc)

        out.write("Saving ...\n\n")
        factory.save(npcs, data_path)

        out.write("Loading ...\n\n")
        npcs = factory.load(data_path, observers)

        out.write("Warriors list:\n")
        out.write("".join(f"{npc}\n" for npc in npcs) + "\n")

        out.write("Fighting ...\n\n")
        out.write("Battle stats " + "_" * 64 + "\n\n")

        manager = FightManager.get()
        stop = threading.Event()

        def wander() -> None:
            while not stop.is_set():
                for npc in npcs:
                    if npc.alive:
                        npc.move(MAX_X - 1, MAX_Y - 1)
                schedule_fights(npcs, manager)
                stop.wait(args.tick)

        fight_thread = threading.Thread(target=manager.run, args=(stop,), daemon=True)
        move_thread = threading.Thread(target=wander, daemon=True)
        fight_thread.start()
        move_thread.start()

        run_time = args.seconds
        while run_time > 0:
            run_time -= 1
            out.write(render_map(npcs, len(npcs)) + f"\nTimer: {run_time}s\n")
            out.flush()
            if run_time == 1:
                stop.set()
            time.sleep(args.tick)

        stop.set()
        move_thread.join()
        fight_thread.join()

        out.write("_" * 78 + "\n\n")
        out.write("Survivors:\n")
        out.write("".join(f"{npc}\n" for npc in npcs if npc.alive))
    return 0


if __name__ == "__main__":
    sys.exit(main())