"""Deck parsing: plain-text Q:/A: files into a FlashcardSet.

Format:
    Title line
    Q: question text
    A: answer text
    ...

A `Q:` replaces any question still waiting for its answer, so a question with
no `A:` is dropped. An `A:` without a pending question is ignored, as is every
other line. Content is single-line only.
"""

import pathlib

from studyset.models import Flashcard, FlashcardSet


class EmptyDeckError(ValueError):
    """Raised when a deck file holds no complete question/answer pair."""


def parse_flashcards(text: str) -> FlashcardSet:
    lines = text.split("\n")
    title = lines[0].strip()

    cards = []
    pending = ""
    for line in lines[1:]:
        stripped = line.strip()
        if stripped.startswith("Q:"):
            pending = stripped[2:].strip()
        elif stripped.startswith("A:") and pending:
            cards.append(Flashcard(id=len(cards), question=pending,
                                   answer=stripped[2:].strip()))
            pending = ""

    return FlashcardSet(title=title, cards=tuple(cards))


def load_flashcards(path: pathlib.Path | str) -> FlashcardSet:
    """Read and parse a deck file, failing fast on an empty deck.

    Raises:
        OSError: the file is missing or unreadable.
        EmptyDeckError: the file parsed to zero cards.
    """
    path = pathlib.Path(path)
    flashcard_set = parse_flashcards(path.read_text(encoding="utf-8"))
    if not flashcard_set.cards:
        raise EmptyDeckError(f"No flashcards found in {path}")
    return flashcard_set
