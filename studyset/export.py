"""CSV export of a deck."""

from typing import Iterable

from studyset.models import Flashcard

EXPORT_FILENAME = "flashcards.csv"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_csv(cards: Iterable[Flashcard]) -> str:
    rows = ["Question,Answer"]
    for card in cards:
        rows.append(f"{_quote(card.question)},{_quote(card.answer)}")
    return "\n".join(rows)
