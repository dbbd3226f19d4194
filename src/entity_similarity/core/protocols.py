"""Protocols (interfaces) for entity similarity components."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from entity_similarity.core.types import (
        Entity,
        PartOfSpeech,
        SimilarityBreakdown,
    )


@runtime_checkable
class WordSimilarityOracle(Protocol):
    """Lexical similarity between two word tokens.

    Implementations return a score in [0, 1] and must return 0.0 rather
    than raise for unknown tokens or backend failures.
    """

    def similarity(
        self,
        token_a: str,
        pos_a: PartOfSpeech,
        token_b: str,
        pos_b: PartOfSpeech,
    ) -> float:
        """Score how similar two tokens are."""
        ...


@runtime_checkable
class PairCache(Protocol):
    """Cache of computed breakdowns keyed by entity identity."""

    def get(
        self, entity_one: Entity, entity_two: Entity, mode: bool
    ) -> SimilarityBreakdown | None:
        """Return the stored breakdown for exactly these objects, if any."""
        ...

    def put(
        self,
        entity_one: Entity,
        entity_two: Entity,
        mode: bool,
        breakdown: SimilarityBreakdown,
    ) -> None:
        """Store a breakdown for this pair."""
        ...

    def clear(self) -> None:
        """Drop all stored breakdowns."""
        ...
