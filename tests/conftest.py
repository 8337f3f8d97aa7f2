"""
Shared fixtures for the simulation tests.
"""

import random

import pytest

from retro_kombat.config import Action
from retro_kombat.core.simulation import Simulation
from retro_kombat.input_snapshot import InputSnapshot


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sim(rng):
    """Simulation already in the PLAYING phase"""
    simulation = Simulation(rng=rng)
    simulation.start_game()
    return simulation


def held(p1=(), p2=()):
    """InputSnapshot with the given actions held by player 1 and 2"""
    return InputSnapshot.from_actions({1: p1, 2: p2})


def run(simulation, ticks, inputs=None):
    snapshot = simulation.snapshot
    for _ in range(ticks):
        snapshot = simulation.tick(inputs or held())
    return snapshot


ATTACK = (Action.ATTACK,)
BLOCK = (Action.BLOCK,)
SPECIAL = (Action.SPECIAL,)
