"""Shared test fixtures."""

import random

import pytest

from studyset.app import App
from studyset.parser import parse_flashcards

DECK_TEXT = """Python Basics
Q: What does len() return?
A: The number of items in a container.
Q: What is a list comprehension?
A: A concise way to build a list from an iterable.
Q: Which keyword defines a function?
A: def
Q: What does the "is" operator compare?
A: Object identity, not equality.
Q: What is a tuple?
A: An immutable ordered sequence.
Q: What does dict.get() return for a missing key?
A: None, or the supplied default value.
Q: What does range(3) produce?
A: The integers 0, 1 and 2.
Q: Which exception does int("x") raise?
A: ValueError
"""


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def deck_text():
    return DECK_TEXT


@pytest.fixture
def flashcard_set():
    return parse_flashcards(DECK_TEXT)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def deck_file(tmp_path):
    path = tmp_path / "flashcards.txt"
    path.write_text(DECK_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def app(tmp_path, flashcard_set, rng, clock):
    """App with an empty config dir, deterministic rng and fake clock."""
    a = App(config_dir=tmp_path / "config", rng=rng, clock=clock)
    a.load(flashcard_set=flashcard_set)
    yield a
    a.close()
