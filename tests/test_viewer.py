"""Tests for the flip-card viewer."""

import pytest

from studyset.models import Flashcard, FlashcardSet
from studyset.viewer import Face, Overlay, ViewerSession


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, n):
        return self.value % n


def _deck(n):
    return FlashcardSet("T", tuple(Flashcard(i, f"Q{i}", f"A{i}") for i in range(n)))


def test_starts_on_first_question(flashcard_set):
    v = ViewerSession(flashcard_set)
    assert v.index == 0
    assert v.face is Face.QUESTION
    assert v.overlay is Overlay.CLOSED
    assert v.current_card.id == 0


def test_flip_toggles(flashcard_set):
    v = ViewerSession(flashcard_set)
    v.flip()
    assert v.face is Face.ANSWER
    v.flip()
    assert v.face is Face.QUESTION


def test_next_wraps_to_first():
    v = ViewerSession(_deck(3))
    v.next()
    v.next()
    assert v.index == 2
    v.next()
    assert v.index == 0


def test_previous_wraps_to_last():
    v = ViewerSession(_deck(3))
    v.previous()
    assert v.index == 2


def test_navigation_shows_question():
    v = ViewerSession(_deck(3))
    v.flip()
    v.next()
    assert v.face is Face.QUESTION
    v.flip()
    v.previous()
    assert v.face is Face.QUESTION


def test_single_card_navigation():
    v = ViewerSession(_deck(1))
    v.next()
    assert v.index == 0
    v.previous()
    assert v.index == 0


def test_shuffle_uses_injected_rng():
    v = ViewerSession(_deck(5), rng=FixedRng(3))
    v.flip()
    v.shuffle()
    assert v.index == 3
    assert v.face is Face.QUESTION


def test_shuffle_stays_in_range(rng):
    v = ViewerSession(_deck(4), rng=rng)
    for _ in range(50):
        v.shuffle()
        assert 0 <= v.index < 4


@pytest.mark.parametrize("key,action", [
    (" ", "flip"),
    ("Enter", "flip"),
    ("ArrowRight", "next"),
    ("ArrowLeft", "previous"),
    ("/", "open_search"),
])
def test_key_bindings(key, action):
    v = ViewerSession(_deck(3))
    assert v.handle_key(key) == action


def test_keys_drive_state():
    v = ViewerSession(_deck(3))
    v.handle_key(" ")
    assert v.face is Face.ANSWER
    v.handle_key("ArrowRight")
    assert (v.index, v.face) == (1, Face.QUESTION)
    v.handle_key("ArrowLeft")
    v.handle_key("ArrowLeft")
    assert v.index == 2


def test_unknown_key_ignored():
    v = ViewerSession(_deck(3))
    assert v.handle_key("x") is None
    assert (v.index, v.face) == (0, Face.QUESTION)


def test_search_overlay_captures_keys():
    v = ViewerSession(_deck(3))
    v.handle_key("/")
    assert v.overlay is Overlay.SEARCH
    assert v.handle_key("ArrowRight") is None
    assert v.handle_key(" ") is None
    assert v.index == 0
    assert v.face is Face.QUESTION
    assert v.handle_key("Escape") == "close_search"
    assert v.overlay is Overlay.CLOSED


def test_escape_has_no_side_effects():
    v = ViewerSession(_deck(3))
    v.next()
    v.flip()
    v.open_search()
    v.handle_key("Escape")
    assert (v.index, v.face, v.overlay) == (1, Face.ANSWER, Overlay.CLOSED)


def test_swipe_left_goes_next():
    v = ViewerSession(_deck(3))
    assert v.swipe(200, 100) == "next"
    assert v.index == 1


def test_swipe_right_goes_previous():
    v = ViewerSession(_deck(3))
    assert v.swipe(100, 200) == "previous"
    assert v.index == 2


@pytest.mark.parametrize("start,end", [(100, 150), (150, 100), (100, 120), (100, 100)])
def test_short_drag_is_ignored(start, end):
    v = ViewerSession(_deck(3))
    assert v.swipe(start, end) is None
    assert v.index == 0


def test_search_matches_question_and_answer_case_insensitively(flashcard_set):
    v = ViewerSession(flashcard_set)
    assert [c.id for c in v.search("TUPLE")] == [4]
    assert [c.id for c in v.search("immutable")] == [4]
    assert [c.id for c in v.search("what does")] == [0, 3, 5, 6]


def test_search_limit_keeps_card_order():
    fs = FlashcardSet("T", tuple(Flashcard(i, f"term {i}", "x") for i in range(15)))
    v = ViewerSession(fs)
    results = v.search("term")
    assert [c.id for c in results] == list(range(10))


def test_search_blank_query(flashcard_set):
    v = ViewerSession(flashcard_set)
    assert v.search("") == []
    assert v.search("   ") == []


def test_search_no_match(flashcard_set):
    assert ViewerSession(flashcard_set).search("zzz") == []


def test_select_result_jumps_and_closes(flashcard_set):
    v = ViewerSession(flashcard_set)
    v.flip()
    v.open_search()
    v.select_result(6)
    assert v.index == 6
    assert v.face is Face.QUESTION
    assert v.overlay is Overlay.CLOSED


def test_select_unknown_result(flashcard_set):
    v = ViewerSession(flashcard_set)
    with pytest.raises(KeyError):
        v.select_result(42)


def test_to_dict(flashcard_set):
    v = ViewerSession(flashcard_set)
    v.next()
    v.flip()
    data = v.to_dict()
    assert data["mode"] == "viewer"
    assert data["index"] == 1
    assert data["total"] == 8
    assert data["face"] == "answer"
    assert data["overlay"] == "closed"
    assert data["card"]["question"] == "What is a list comprehension?"
