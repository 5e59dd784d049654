"""Learn mode: multiple-choice quiz over a shuffled deck."""

import enum

from studyset.models import Flashcard
from studyset.session import ModeSession, percent
from studyset.shuffle import draw, shuffled

DISTRACTORS = 3


class LearnState(enum.Enum):
    ASKING = "asking"
    ANSWERED = "answered"
    COMPLETE = "complete"


class LearnSession(ModeSession):
    mode = "learn"

    def __init__(self, flashcard_set, rng=None):
        super().__init__(flashcard_set, rng)
        self.restart()

    def restart(self):
        """Reshuffle the deck and zero the score."""
        self.order: list[Flashcard] = shuffled(self.cards, self.rng)
        self.correct = 0
        self.incorrect = 0
        self._ask(0)

    def _ask(self, index: int):
        self.index = index
        self.selected: str | None = None
        self.state = LearnState.ASKING
        self.options = self._build_options(self.current_card)

    def _build_options(self, card: Flashcard) -> list[str]:
        others = [c for c in self.cards if c.id != card.id]
        wrong = [c.answer for c in draw(others, DISTRACTORS, self.rng)]
        return shuffled([card.answer] + wrong, self.rng)

    @property
    def current_card(self) -> Flashcard:
        return self.order[self.index]

    @property
    def is_last(self) -> bool:
        return self.index == len(self.order) - 1

    @property
    def answered(self) -> int:
        return self.correct + self.incorrect

    @property
    def percentage(self) -> int:
        return percent(self.correct, self.answered)

    def select(self, option: str) -> bool | None:
        """Answer the current question. Returns correctness, or None if ignored."""
        if self.state is not LearnState.ASKING:
            return None
        self.selected = option
        is_correct = option == self.current_card.answer
        if is_correct:
            self.correct += 1
        else:
            self.incorrect += 1
        self.state = LearnState.COMPLETE if self.is_last else LearnState.ANSWERED
        return is_correct

    def continue_(self):
        if self.state is LearnState.ANSWERED and not self.is_last:
            self._ask(self.index + 1)

    def to_dict(self) -> dict:
        data = {
            "mode": self.mode,
            "state": self.state.value,
            "index": self.index,
            "total": len(self.order),
            "question": self.current_card.question,
            "options": self.options,
            "selected": self.selected,
            "score": {"correct": self.correct, "incorrect": self.incorrect},
        }
        if self.state is not LearnState.ASKING:
            data["answer"] = self.current_card.answer
        if self.state is LearnState.COMPLETE:
            data["percentage"] = self.percentage
        return data
