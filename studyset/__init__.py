"""studyset — browser flashcard study modes for a Q:/A: text deck."""

__version__ = "0.1.0"

from studyset.models import Flashcard, FlashcardSet
from studyset.app import App

__all__ = ["App", "Flashcard", "FlashcardSet"]
