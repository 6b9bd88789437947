import random

import pytest

from game import Game


class ManualClock:
    def __init__(self, start=0.0):
        self.t = start

    def __call__(self):
        return self.t


class DictStore:
    def __init__(self, data=None):
        self.data = dict(data or {})
        self.writes = []

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value
        self.writes.append((key, value))


class ListScheduler:
    def __init__(self):
        self.requests = []

    def __call__(self, callback):
        self.requests.append(callback)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def scheduler():
    return ListScheduler()


@pytest.fixture
def game(store, scheduler, clock):
    g = Game(store, scheduler, clock=clock, rng=random.Random(7))
    g.start()
    return g
