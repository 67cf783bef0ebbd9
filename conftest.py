import random

import pytest

from backend import sessions


class ScriptedRandom(random.Random):
    """Random source that replays scripted values.

    rolls: returned by random(); default 0.99 (no hazard)
    ints : returned by randint(); default the lower bound
    picks: indexes used by choice(); default 0
    """

    def __new__(cls, *args, **kwargs):
        # random.Random.__new__ rejects extra constructor arguments
        return super().__new__(cls)

    def __init__(self, rolls=(), ints=(), picks=()):
        super().__init__(0)
        self.rolls = list(rolls)
        self.ints = list(ints)
        self.picks = list(picks)

    def random(self):
        return self.rolls.pop(0) if self.rolls else 0.99

    def randint(self, a, b):
        if not self.ints:
            return a
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
        return value

    def choice(self, seq):
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]


@pytest.fixture
def make_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture(autouse=True)
def clean_sessions():
    """Empty the realm registry before every test."""
    sessions.init_sessions()
    yield
