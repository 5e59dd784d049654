"""Shared data classes used across the parser and study modes."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Flashcard:
    id: int
    question: str
    answer: str

    def to_dict(self) -> dict:
        return {"id": self.id, "question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class FlashcardSet:
    title: str
    cards: tuple[Flashcard, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def card_by_id(self, card_id: int) -> Flashcard:
        for card in self.cards:
            if card.id == card_id:
                return card
        raise KeyError(card_id)
