"""Match mode: pair question tiles with answer tiles against the clock."""

import enum
import time
from dataclasses import dataclass
from typing import Callable

from studyset.models import Flashcard
from studyset.session import ModeSession
from studyset.shuffle import shuffled

PAIRS = 6
TILE_TEXT_LIMIT = 80


class TileKind(enum.Enum):
    QUESTION = "question"
    ANSWER = "answer"


class MatchPhase(enum.Enum):
    READY = "ready"
    RUNNING = "running"
    COMPLETE = "complete"


@dataclass(frozen=True)
class Tile:
    id: str
    card_id: int
    kind: TileKind
    text: str


def truncate(text: str, limit: int = TILE_TEXT_LIMIT) -> str:
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def build_tiles(cards: list[Flashcard]) -> list[Tile]:
    tiles = []
    for card in cards:
        tiles.append(Tile(f"q-{card.id}", card.id, TileKind.QUESTION, truncate(card.question)))
        tiles.append(Tile(f"a-{card.id}", card.id, TileKind.ANSWER, truncate(card.answer)))
    return tiles


class Stopwatch:
    """Elapsed time in tenths of a second from an injected monotonic clock."""

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.started_at: float | None = None
        self.stopped_tenths: int | None = None

    @property
    def running(self) -> bool:
        return self.started_at is not None and self.stopped_tenths is None

    def start(self):
        self.started_at = self.clock()
        self.stopped_tenths = None

    def stop(self) -> int:
        if self.running:
            self.stopped_tenths = self._since_start()
        return self.elapsed_tenths()

    def reset(self):
        self.started_at = None
        self.stopped_tenths = None

    def elapsed_tenths(self) -> int:
        if self.started_at is None:
            return 0
        if self.stopped_tenths is not None:
            return self.stopped_tenths
        return self._since_start()

    def _since_start(self) -> int:
        # float error must not drop a tenth at exact boundaries
        return int(round((self.clock() - self.started_at) * 10, 6))


class MatchGame(ModeSession):
    mode = "match"

    def __init__(self, flashcard_set, rng=None, clock: Callable[[], float] = time.monotonic):
        super().__init__(flashcard_set, rng)
        self.game_cards = shuffled(self.cards, self.rng)[:PAIRS]
        self.stopwatch = Stopwatch(clock)
        self.best_tenths: int | None = None
        self.new_best = False
        self.reset()

    def reset(self):
        """Deal the same cards again in a fresh tile order."""
        self.tiles = shuffled(build_tiles(self.game_cards), self.rng)
        self._tiles_by_id = {t.id: t for t in self.tiles}
        self.matched_card_ids: set[int] = set()
        self.selected: str | None = None
        self.phase = MatchPhase.READY
        self.new_best = False
        self.stopwatch.reset()

    @property
    def total_pairs(self) -> int:
        return len(self.game_cards)

    @property
    def matched_count(self) -> int:
        return len(self.matched_card_ids)

    def is_matched(self, tile: Tile) -> bool:
        return tile.card_id in self.matched_card_ids

    def click(self, tile_id: str) -> bool | None:
        """Click a tile.

        Returns True/False for whether a second click completed a pair,
        None for a first selection or an ignored click.
        """
        tile = self._tiles_by_id[tile_id]
        if self.is_matched(tile) or tile_id == self.selected:
            return None

        if self.phase is MatchPhase.READY:
            self.stopwatch.start()
            self.phase = MatchPhase.RUNNING

        if self.selected is None:
            self.selected = tile_id
            return None

        first = self._tiles_by_id[self.selected]
        self.selected = None
        if first.card_id != tile.card_id or first.kind is tile.kind:
            return False

        self.matched_card_ids.add(tile.card_id)
        if self.matched_count == self.total_pairs:
            self._finish()
        return True

    def _finish(self):
        elapsed = self.stopwatch.stop()
        self.phase = MatchPhase.COMPLETE
        if self.best_tenths is None or elapsed < self.best_tenths:
            self.best_tenths = elapsed
            self.new_best = True

    def close(self):
        self.stopwatch.stop()

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "phase": self.phase.value,
            "tiles": [
                {"id": t.id, "text": t.text, "kind": t.kind.value,
                 "matched": self.is_matched(t)}
                for t in self.tiles
            ],
            "selected": self.selected,
            "matched_count": self.matched_count,
            "total_pairs": self.total_pairs,
            "elapsed_tenths": self.stopwatch.elapsed_tenths(),
            "running": self.stopwatch.running,
            "best_tenths": self.best_tenths,
            "new_best": self.new_best,
        }
