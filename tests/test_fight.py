import itertools
import threading
import time

from npcbattle.fight import FightEvent, FightManager
from npcbattle.live import Elf, Outlaw, Squirrel
from npcbattle.observers import Observer


class _FixedRng:
    def __init__(self, *values):
        self._values = itertools.cycle(values)

    def randrange(self, stop):
        return next(self._values)


class _Recorder(Observer):
    def __init__(self):
        self.kills = []

    def report_killed(self, attacker, defender):
        self.kills.append((attacker, defender))


def test_get_returns_singleton_instance():
    first = FightManager.get()
    second = FightManager.get()
    assert second is first
    before = len(second)
    first.add_event(FightEvent(Elf(0, 0), Outlaw(0, 0)))
    assert len(second) == before + 1
    assert second.process_next() is True
    assert len(first) == before


def test_add_event_adds_event_to_queue():
    manager = FightManager()
    manager.add_event(FightEvent(Elf(0, 0), Outlaw(0, 0)))
    manager.add_event(FightEvent(Outlaw(0, 0), Squirrel(0, 0)))
    assert len(manager) == 2


def test_process_next_on_empty_queue():
    assert FightManager().process_next() is False


def test_process_next_resolves_fight():
    recorder = _Recorder()
    elf = Elf(0, 0, rng=_FixedRng(5))
    outlaw = Outlaw(0, 0, rng=_FixedRng(0))
    elf.attach(recorder)
    manager = FightManager()
    manager.add_event(FightEvent(attacker=elf, defender=outlaw))
    assert manager.process_next() is True
    assert not outlaw.alive
    assert recorder.kills == [(elf, outlaw)]
    assert len(manager) == 0


def test_process_next_skips_dead():
    recorder = _Recorder()
    squirrel = Squirrel(0, 0, rng=_FixedRng(5))
    elf = Elf(0, 0, rng=_FixedRng(0))
    squirrel.attach(recorder)
    elf.must_die()
    manager = FightManager()
    manager.add_event(FightEvent(attacker=squirrel, defender=elf))
    assert manager.process_next() is True
    assert recorder.kills == []
    assert len(manager) == 0


def test_events_are_first_in_first_out():
    recorder = _Recorder()
    first = Elf(0, 0, rng=_FixedRng(5))
    second = Elf(0, 0, rng=_FixedRng(5))
    first.attach(recorder)
    second.attach(recorder)
    target_a = Outlaw(0, 0, rng=_FixedRng(0))
    target_b = Outlaw(0, 0, rng=_FixedRng(0))
    manager = FightManager()
    manager.add_event(FightEvent(first, target_a))
    manager.add_event(FightEvent(second, target_b))
    manager.process_next()
    manager.process_next()
    assert recorder.kills == [(first, target_a), (second, target_b)]


def test_run_returns_when_stopped():
    manager = FightManager()
    manager.add_event(FightEvent(Elf(0, 0), Outlaw(0, 0)))
    stop = threading.Event()
    stop.set()
    manager.run(stop)
    assert len(manager) == 1


def test_run_in_thread_drains_queue():
    elf = Elf(0, 0, rng=_FixedRng(5))
    outlaw = Outlaw(0, 0, rng=_FixedRng(0))
    manager = FightManager()
    stop = threading.Event()
    worker = threading.Thread(target=manager.run, args=(stop,))
    worker.start()
    manager.add_event(FightEvent(elf, outlaw))
    deadline = time.monotonic() + 5
    while len(manager) and time.monotonic() < deadline:
        time.sleep(0.01)
    stop.set()
    worker.join(timeout=5)
    assert not worker.is_alive()
    assert len(manager) == 0
    assert not outlaw.alive