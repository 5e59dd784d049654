"""App: central object that wires together settings, the deck and the active mode."""

import pathlib
import random
import time
from typing import Callable

from studyset.config import get_config_dir, get_data_path, load_settings
from studyset.exam import ExamSession
from studyset.learn import LearnSession
from studyset.match import MatchGame
from studyset.models import FlashcardSet
from studyset.parser import load_flashcards
from studyset.session import ModeSession
from studyset.viewer import ViewerSession

MODES = ("viewer", "learn", "match", "test")


class App:
    """Holds all shared state for a study process.

    Usage:
        app = App()
        app.load()                       # FILE= from config, else ./data/flashcards.txt
        session = app.enter_mode("learn")
        ...
        app.close()

    For testing:
        app = App(config_dir=tmp_path, rng=random.Random(0), clock=fake_clock)
        app.load(flashcard_set=some_set)
    """

    def __init__(self, config_dir: pathlib.Path | str | None = None,
                 rng: random.Random | None = None,
                 clock: Callable[[], float] = time.monotonic):
        if config_dir is None:
            config_dir = get_config_dir()
        self.config_dir = pathlib.Path(config_dir)
        self.settings = load_settings(self.config_dir)
        self.rng = rng or random.Random()
        self.clock = clock
        self.flashcard_set: FlashcardSet | None = None
        self.session: ModeSession | None = None

    def load(self, data_path: pathlib.Path | str | None = None,
             flashcard_set: FlashcardSet | None = None) -> FlashcardSet:
        """Load the deck once. Raises OSError or EmptyDeckError on bad input."""
        if flashcard_set is None:
            if data_path is None:
                data_path = get_data_path(self.config_dir)
            flashcard_set = load_flashcards(data_path)
        self.flashcard_set = flashcard_set
        return flashcard_set

    @property
    def mode(self) -> str | None:
        return self.session.mode if self.session else None

    def enter_mode(self, name: str) -> ModeSession:
        """Start a fresh session for a mode, discarding the previous one."""
        if name not in MODES:
            raise ValueError(f"Unknown mode: {name}")
        if self.flashcard_set is None:
            raise ValueError("No flashcards loaded")
        self.leave_mode()
        if name == "viewer":
            self.session = ViewerSession(self.flashcard_set, self.rng)
        elif name == "learn":
            self.session = LearnSession(self.flashcard_set, self.rng)
        elif name == "match":
            self.session = MatchGame(self.flashcard_set, self.rng, self.clock)
        else:
            self.session = ExamSession(self.flashcard_set, self.rng)
        return self.session

    def leave_mode(self):
        if self.session:
            self.session.close()
            self.session = None

    def close(self):
        self.leave_mode()
