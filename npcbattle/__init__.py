"""NPC battle simulation with elves, outlaws and squirrels, in rounds or in real time."""

__version__ = "0.1.0"