# npcbattle

npcbattle is a small console simulation of non-player characters fighting on
a field. There are three kinds of NPC (`npcbattle.kinds.NPCType`): elves,
outlaws and squirrels. Each kind hunts exactly one other kind:

- an elf kills an outlaw,
- an outlaw kills a squirrel,
- a squirrel kills an elf.

Observers attached to an NPC are told about every kill it makes
(`npcbattle.observers`):

- `ConsoleObserver` writes `<defender> | killed by | <attacker>` to a stream,
  which is standard output unless you pass another one.
- `LogObserver` writes the same line to a file. The file is truncated when
  the observer is opened. `LogObserver` works as a context manager and also
  has a `close()` method.

An NPC prints as `Name_N {x : X, y : Y}`. The number `N` comes from a single
counter shared by all NPCs.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

### `npcbattle-classic`

This is the round-based battle. The command:

1. generates NPCs of random kinds at random positions from 1 to 500 on each
   axis;
2. saves them to a data file and loads them back;
3. lets them fight in rounds. The fighting distance starts at 50 and grows by
   50 each round, up to 500, and the rounds stop early if no NPC is left. In
   each round every living NPC attacks every other living NPC within the
   distance. After each round the command prints how many NPCs were killed.
4. prints the survivors at the end.

```
npcbattle-classic [--count N] [--data PATH] [--log PATH] [--seed SEED]
```

| Option    | Default                | Meaning                          |
|-----------|------------------------|----------------------------------|
| `--count` | `100`                  | number of NPCs to generate       |
| `--data`  | `game_data/npc.txt`    | file the NPCs are saved to       |
| `--log`   | `logs/battle_logs.log` | kill log file                    |
| `--seed`  | none                   | seed for the random generator    |

### `npcbattle-live`

This is the real-time battle. The command generates NPCs at positions from 0
to 99 on each axis, then saves them and loads them back. It then starts two
background threads:

- One thread moves every living NPC one random step per tick, keeping it
  inside the field, and queues fights with `schedule_fights`.
- The other thread is the fight manager, which resolves the queued fights one
  at a time.

A fight only takes place when the defender is the attacker's prey. The
attacker kills the defender only if it rolls more energy (1 to 6) than the
defender. Each kind has its own `damage_range` and its own maximum step:

| Kind     | `damage_range` | step |
|----------|----------------|------|
| Elf      | 50             | 10   |
| Outlaw   | 10             | 10   |
| Squirrel | 5              | 5    |

On every tick the command prints a survivor count and a 20 × 20 map of the
field, followed by a countdown. When the countdown ends, the command lists
the survivors.

```
npcbattle-live [--count N] [--data PATH] [--log PATH] [--seed SEED]
               [--seconds N] [--tick SECONDS]
```

| Option      | Default                | Meaning                         |
|-------------|------------------------|---------------------------------|
| `--count`   | `50`                   | number of NPCs to generate      |
| `--data`    | `game_data/npc.txt`    | file the NPCs are saved to      |
| `--log`     | `logs/battle_logs.txt` | kill log file                   |
| `--seed`    | none                   | seed for the random generator   |
| `--seconds` | `30`                   | number of ticks to run          |
| `--tick`    | `1.0`                  | length of a tick in seconds     |

Both commands create the parent directories of the data and log files if
they do not exist.

## Using the library

### Round-based model

The round-based model is in `npcbattle.classic` (classes `NPC`, `Elf`,
`Outlaw` and `Squirrel`) and `npcbattle.classic_factory` (class
`NPCFactory`). The game itself is in `npcbattle.classic_game`, which provides
`generate_npcs` and `battle`.

```python
import sys

from npcbattle.classic_factory import NPCFactory
from npcbattle.kinds import NPCType
from npcbattle.observers import ConsoleObserver

factory = NPCFactory()
elf = factory.create_npc(NPCType.ELF, 1, 2)
outlaw = factory.create_npc(NPCType.OUTLAW, 3, 4)
elf.attach(ConsoleObserver(sys.stdout))

outlaw.accept(elf)   # True: the elf kills the outlaw and the observer reports it
```

- `defender.accept(attacker)` returns `True` and marks the defender dead when
  the attacker kills it.
- `npc.near(other, distance)` tells whether `other` lies within `distance`.
- `create_npc` raises `ValueError` for `NPCType.UNKNOWN`.

### Saving and loading

`NPCFactory.save(npcs, path)` writes a plain text file. The file holds the
count, followed by the type name, x and y of each NPC, one value per line.

`NPCFactory.load(path, observers)` reads such a file back and attaches the
given observers to every NPC it creates. Loading behaves as follows:

- A missing or empty file gives an empty list.
- An unknown type name or a truncated file raises `ValueError`.

### Real-time model

The real-time model is in `npcbattle.live`, `npcbattle.live_factory`,
`npcbattle.fight` and `npcbattle.live_game`.

In `npcbattle.live`, the `NPC` classes keep their position and liveness
behind a lock. They have:

- `energy()`, `move(max_x, max_y)` and `must_die()`;
- a `position` property.

`npcbattle.live_factory.NPCFactory` takes an optional `random.Random`. Every
NPC it creates uses that generator.

`npcbattle.fight` provides the fight queue:

- `FightManager.get()` returns the shared manager.
- `add_event(FightEvent(attacker, defender))` queues a fight.
- `process_next()` resolves the oldest queued fight. It drops the fight if
  either side is already dead, and returns `False` when the queue is empty.
- `run(stop)` keeps resolving fights until the `threading.Event` `stop` is
  set.

`npcbattle.live_game` provides two helpers:

- `schedule_fights(npcs, manager)` queues a fight for every ordered pair of
  living NPCs that lie within the defender's `damage_range`, and returns how
  many fights it queued.
- `render_map(npcs, total, grid=20)` returns the map text. A cell shows `El`,
  `Ot` or `Sq` for a single living NPC, the number of living NPCs when
  several share the cell, and `.` where only dead NPCs lie.