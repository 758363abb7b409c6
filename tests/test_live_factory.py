import pytest

from npcbattle.kinds import NPCType
from npcbattle.live import Elf, Outlaw, Squirrel
from npcbattle.live_factory import NPCFactory
from npcbattle.observers import Observer


class _Recorder(Observer):
    def __init__(self):
        self.kills = []

    def report_killed(self, attacker, defender):
        self.kills.append((attacker, defender))


def _three(factory):
    return [
        factory.create_npc(NPCType.ELF, 1, 2),
        factory.create_npc(NPCType.OUTLAW, 3, 4),
        factory.create_npc(NPCType.SQUIRREL, 5, 6),
    ]


def test_create_npc():
    elf, outlaw, squirrel = _three(NPCFactory())
    assert isinstance(elf, Elf) and elf.position == (1, 2)
    assert isinstance(outlaw, Outlaw) and outlaw.position == (3, 4)
    assert isinstance(squirrel, Squirrel) and squirrel.position == (5, 6)
    assert all(npc.alive for npc in (elf, outlaw, squirrel))


def test_create_unknown_type():
    with pytest.raises(ValueError):
        NPCFactory().create_npc(NPCType.UNKNOWN, 0, 0)


def test_save_format(tmp_path):
    path = tmp_path / "test.txt"
    NPCFactory().save(_three(NPCFactory()), path)
    assert path.read_text() == "3\nElf\n1\n2\nOutlaw\n3\n4\nSquirrel\n5\n6\n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "test.txt"
    factory = NPCFactory()
    original = _three(factory)
    factory.save(original, path)
    loaded = factory.load(path)
    assert [(n.type_name, n.position) for n in loaded] == [
        (n.type_name, n.position) for n in original
    ]


def test_load_attaches_observers(tmp_path):
    path = tmp_path / "test.txt"
    factory = NPCFactory()
    factory.save(_three(factory), path)
    recorder = _Recorder()
    loaded = factory.load(path, [recorder])
    assert all(npc.observers == (recorder,) for npc in loaded)


def test_load_missing_file(tmp_path):
    assert NPCFactory().load(tmp_path / "absent.txt") == []


def test_load_unknown_type(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1\nDragon\n1\n2\n")
    with pytest.raises(ValueError):
        NPCFactory().load(path)


def test_load_truncated(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("2\nElf\n1\n2\n")
    with pytest.raises(ValueError):
        NPCFactory().load(path)


def test_save_empty(tmp_path):
    path = tmp_path / "empty.txt"
    factory = NPCFactory()
    factory.save([], path)
    assert path.read_text() == "0\n"
    assert factory.load(path) == []