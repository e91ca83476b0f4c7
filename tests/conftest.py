import random

import pytest

from engine.ai_player import AIPlayer
from session.config import SessionConfig
from session.controller import GameController
from session.storage import GameStorage


class FixedRandom(random.Random):
    """random() always returns the same value; choice() still works."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value

    # Defining getrandbits keeps choice() on the bit generator, not random()
    def getrandbits(self, k):
        return super().getrandbits(k)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def storage(tmp_path):
    return GameStorage(SessionConfig(data_dir=tmp_path / "data"))


@pytest.fixture
def controller(storage, rng):
    return GameController(storage, ai=AIPlayer(rng=rng))
