"""Viewer mode: one card at a time, flip, navigate, shuffle and search."""

import enum

from studyset.models import Flashcard
from studyset.session import ModeSession

SWIPE_THRESHOLD = 50
SEARCH_LIMIT = 10


class Face(enum.Enum):
    QUESTION = "question"
    ANSWER = "answer"


class Overlay(enum.Enum):
    CLOSED = "closed"
    SEARCH = "search"


# key -> action, per overlay state
_KEY_ACTIONS = {
    Overlay.CLOSED: {
        " ": "flip",
        "Enter": "flip",
        "ArrowRight": "next",
        "ArrowLeft": "previous",
        "/": "open_search",
    },
    Overlay.SEARCH: {
        "Escape": "close_search",
    },
}


class ViewerSession(ModeSession):
    mode = "viewer"

    def __init__(self, flashcard_set, rng=None):
        super().__init__(flashcard_set, rng)
        self.index = 0
        self.face = Face.QUESTION
        self.overlay = Overlay.CLOSED

    @property
    def current_card(self) -> Flashcard:
        return self.cards[self.index]

    def flip(self):
        self.face = Face.ANSWER if self.face is Face.QUESTION else Face.QUESTION

    def next(self):
        self.face = Face.QUESTION
        self.index = (self.index + 1) % len(self.cards)

    def previous(self):
        self.face = Face.QUESTION
        self.index = (self.index - 1 + len(self.cards)) % len(self.cards)

    def shuffle(self):
        self.index = self.rng.randrange(len(self.cards))
        self.face = Face.QUESTION

    def open_search(self):
        self.overlay = Overlay.SEARCH

    def close_search(self):
        self.overlay = Overlay.CLOSED

    def handle_key(self, key: str) -> str | None:
        """Apply a keyboard key. Returns the action taken, or None."""
        action = _KEY_ACTIONS[self.overlay].get(key)
        if action:
            getattr(self, action)()
        return action

    def swipe(self, start_x: float, end_x: float) -> str | None:
        """Apply a horizontal drag. Dragging left goes forward."""
        diff = start_x - end_x
        if abs(diff) <= SWIPE_THRESHOLD:
            return None
        action = "next" if diff > 0 else "previous"
        getattr(self, action)()
        return action

    def search(self, query: str) -> list[Flashcard]:
        needle = query.strip().lower()
        if not needle:
            return []
        results = []
        for card in self.cards:
            if needle in card.question.lower() or needle in card.answer.lower():
                results.append(card)
                if len(results) == SEARCH_LIMIT:
                    break
        return results

    def select_result(self, card_id: int):
        """Jump to a search result and close the overlay."""
        for i, card in enumerate(self.cards):
            if card.id == card_id:
                self.index = i
                self.face = Face.QUESTION
                self.overlay = Overlay.CLOSED
                return
        raise KeyError(card_id)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "index": self.index,
            "total": len(self.cards),
            "face": self.face.value,
            "overlay": self.overlay.value,
            "card": self.current_card.to_dict(),
        }
