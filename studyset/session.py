"""ModeSession: state shared by every study mode, independent of HTTP."""

import random
import uuid

from studyset.models import FlashcardSet


class ModeSession:
    """Base for one study mode's in-memory session.

    A session is created when its mode is entered and discarded when the
    mode is left. The token ties browser requests to this session, so a tab
    still showing a previous mode gets rejected instead of mutating state.
    """

    mode = ""

    def __init__(self, flashcard_set: FlashcardSet, rng: random.Random | None = None):
        self.flashcard_set = flashcard_set
        self.cards = flashcard_set.cards
        self.rng = rng or random.Random()
        self.token = str(uuid.uuid4())

    def close(self):
        """Release anything still running when the mode is left."""

    def to_dict(self) -> dict:
        raise NotImplementedError


def percent(part: int, whole: int) -> int:
    """Integer percentage rounded half up; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)
