"""Test mode: free-response answers graded by key-word overlap."""

import enum

from studyset.session import ModeSession, percent
from studyset.shuffle import shuffled

QUESTIONS = 10
KEY_WORD_MIN_LENGTH = 4


class ExamState(enum.Enum):
    ANSWERING = "answering"
    SUBMITTED = "submitted"


def key_words(answer: str) -> list[str]:
    return [w for w in answer.lower().strip().split() if len(w) >= KEY_WORD_MIN_LENGTH]


def grade_answer(user_answer: str, correct_answer: str) -> bool:
    """True when at least half (rounded up) of the key words appear in the answer.

    Key words are the tokens of the correct answer longer than three
    characters, matched as substrings anywhere in the lowercased response.
    """
    response = user_answer.lower().strip()
    words = key_words(correct_answer)
    found = sum(1 for w in words if w in response)
    return found >= (len(words) + 1) // 2


class ExamSession(ModeSession):
    mode = "test"

    def __init__(self, flashcard_set, rng=None):
        super().__init__(flashcard_set, rng)
        self.test_cards = shuffled(self.cards, self.rng)[:QUESTIONS]
        self._ids = {c.id for c in self.test_cards}
        self.retake()

    def retake(self):
        self.answers: dict[int, str] = {}
        self.results: dict[int, bool] = {}
        self.state = ExamState.ANSWERING

    def set_answer(self, card_id: int, text: str) -> bool:
        """Store an answer. Returns False once the test is submitted."""
        if card_id not in self._ids:
            raise KeyError(card_id)
        if self.state is not ExamState.ANSWERING:
            return False
        self.answers[card_id] = text
        return True

    def submit(self):
        if self.state is ExamState.SUBMITTED:
            return
        self.results = {
            card.id: grade_answer(self.answers.get(card.id, ""), card.answer)
            for card in self.test_cards
        }
        self.state = ExamState.SUBMITTED

    @property
    def score(self) -> int:
        return sum(1 for ok in self.results.values() if ok)

    @property
    def percentage(self) -> int:
        return percent(self.score, len(self.test_cards))

    def to_dict(self) -> dict:
        submitted = self.state is ExamState.SUBMITTED
        cards = []
        for card in self.test_cards:
            entry = {
                "id": card.id,
                "question": card.question,
                "user_answer": self.answers.get(card.id, ""),
            }
            if submitted:
                entry["answer"] = card.answer
                entry["correct"] = self.results[card.id]
            cards.append(entry)
        data = {
            "mode": self.mode,
            "state": self.state.value,
            "total": len(self.test_cards),
            "cards": cards,
        }
        if submitted:
            data["score"] = self.score
            data["percentage"] = self.percentage
        return data
