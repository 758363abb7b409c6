"""The kinds of NPC that take part in a battle."""

from enum import IntEnum


class NPCType(IntEnum):
    """Kind of an NPC; the numeric values are fixed and used for random picks."""

    UNKNOWN = 0
    OUTLAW = 1
    ELF = 2
    SQUIRREL = 3