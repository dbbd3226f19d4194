"""Identity-keyed caches for computed similarity breakdowns."""

from __future__ import annotations

import threading

from entity_similarity.core.types import Entity, SimilarityBreakdown


class LastPairCache:
    """Remembers the breakdown of the most recently computed entity pair.

    Lookups compare the entities with ``is``: a structurally equal copy is
    a miss. The slot holds strong references, so an ``id()`` can never be
    recycled while cached. The lock only covers the slot itself and is
    never held while scores are being computed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entity_one: Entity | None = None
        self._entity_two: Entity | None = None
        self._mode: bool | None = None
        self._breakdown: SimilarityBreakdown | None = None
        self.hits = 0
        self.misses = 0

    def get(
        self, entity_one: Entity, entity_two: Entity, mode: bool
    ) -> SimilarityBreakdown | None:
        with self._lock:
            if (
                self._breakdown is not None
                and entity_one is self._entity_one
                and entity_two is self._entity_two
                and mode == self._mode
            ):
                self.hits += 1
                return self._breakdown
            self.misses += 1
            return None

    def put(
        self,
        entity_one: Entity,
        entity_two: Entity,
        mode: bool,
        breakdown: SimilarityBreakdown,
    ) -> None:
        with self._lock:
            self._entity_one = entity_one
            self._entity_two = entity_two
            self._mode = mode
            self._breakdown = breakdown

    def clear(self) -> None:
        with self._lock:
            self._entity_one = None
            self._entity_two = None
            self._mode = None
            self._breakdown = None

    @property
    def size(self) -> int:
        return 0 if self._breakdown is None else 1


class NullPairCache:
    """Cache that never stores anything."""

    def get(
        self, entity_one: Entity, entity_two: Entity, mode: bool
    ) -> SimilarityBreakdown | None:
        return None

    def put(
        self,
        entity_one: Entity,
        entity_two: Entity,
        mode: bool,
        breakdown: SimilarityBreakdown,
    ) -> None:
        pass

    def clear(self) -> None:
        pass

    @property
    def size(self) -> int:
        return 0
