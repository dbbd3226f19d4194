"""Pytest fixtures for entity-similarity tests.

Provides fixtures for:
- Sample entities (the Order scenarios)
- Scripted and call-counting oracles
- Engines wired to exact matching or to a scripted oracle
"""

from __future__ import annotations

from typing import Callable
from unittest.mock import MagicMock

import pytest

from entity_similarity.core.types import Entity, EntityField
from entity_similarity.similarity.cache import LastPairCache
from entity_similarity.similarity.config import SimilarityConfig
from entity_similarity.similarity.engine import EntitySimilarityEngine


# ============================================================================
# Entity fixtures
# ============================================================================


def _entity(name: str, *field_names: str) -> Entity:
    """Build an entity with untyped fields."""
    return Entity(name=name, fields=[EntityField(n) for n in field_names])


@pytest.fixture
def order() -> Entity:
    """Order with id and amount."""
    return _entity("Order", "id", "amount")


@pytest.fixture
def order_copy() -> Entity:
    """A second, structurally identical Order object."""
    return _entity("Order", "id", "amount")


@pytest.fixture
def empty_order() -> Entity:
    return _entity("Order")


# ============================================================================
# Oracle fixtures
# ============================================================================


@pytest.fixture
def table_oracle() -> Callable[[dict[tuple[str, str], float]], MagicMock]:
    """Factory for a call-counting oracle scripted by a score table.

    Pairs are looked up in both directions; identical tokens score 1.0 and
    anything else missing from the table scores 0.0.
    """

    def _make(table: dict[tuple[str, str], float]) -> MagicMock:
        def _similarity(token_a, pos_a, token_b, pos_b):
            if token_a == token_b:
                return 1.0
            if (token_a, token_b) in table:
                return table[(token_a, token_b)]
            return table.get((token_b, token_a), 0.0)

        oracle = MagicMock()
        oracle.similarity.side_effect = _similarity
        return oracle

    return _make


# ============================================================================
# Engine fixtures
# ============================================================================


@pytest.fixture
def exact_engine() -> EntitySimilarityEngine:
    """Engine running in exact-match mode; WordNet is never touched."""
    return EntitySimilarityEngine(
        SimilarityConfig(use_semantic_oracle=False),
        semantic_oracle=MagicMock(),
    )


@pytest.fixture
def scripted_engine(table_oracle):
    """Factory for an engine whose semantic oracle is a score table."""

    def _make(table: dict[tuple[str, str], float], **config_kwargs):
        oracle = table_oracle(table)
        engine = EntitySimilarityEngine(
            SimilarityConfig(**config_kwargs),
            semantic_oracle=oracle,
            cache=LastPairCache(),
        )
        return engine, oracle

    return _make
