"""Tests for CSV export."""

import csv
import io

from studyset.export import export_csv
from studyset.models import Flashcard


def test_header_and_quoting():
    text = export_csv([Flashcard(0, "a", "b")])
    assert text == 'Question,Answer\n"a","b"'


def test_internal_quotes_are_doubled():
    text = export_csv([Flashcard(0, 'Say "hi"', 'He said "no", twice')])
    assert text.splitlines()[1] == '"Say ""hi""","He said ""no"", twice"'


def test_empty_deck_is_header_only():
    assert export_csv([]) == "Question,Answer"


def test_csv_reader_recovers_cards(flashcard_set):
    rows = list(csv.reader(io.StringIO(export_csv(flashcard_set.cards))))
    assert rows[0] == ["Question", "Answer"]
    assert rows[1:] == [[c.question, c.answer] for c in flashcard_set]
