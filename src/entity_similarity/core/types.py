"""Data types for entity similarity and field correspondence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class PartOfSpeech(Enum):
    """Part-of-speech hint passed to word similarity oracles."""

    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"


@dataclass(eq=False)
class EntityField:
    """A named field of an entity.

    Compares and hashes by identity, so same-named fields of different
    entities stay distinct keys in a correspondence.
    """

    name: str
    type: str | None = None  # carried from extraction, unused when matching


@dataclass(eq=False)
class Entity:
    """A named structured record extracted from source code.

    Identity is object identity: the pair cache only short-circuits for the
    exact same objects, never for structurally equal copies.
    """

    name: str
    fields: list[EntityField] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.fields is None:
            self.fields = []


@dataclass(frozen=True)
class FieldCandidate:
    """A candidate field of the second entity with its similarity score."""

    score: float
    field: EntityField


@dataclass
class Correspondence:
    """Injective partial mapping from one entity's fields to another's.

    Every field of the first entity is a key; unmapped fields map to None.
    """

    matches: dict[EntityField, FieldCandidate | None] = field(default_factory=dict)
    passes: int = 0
    revocations: int = 0

    def mapped(self) -> dict[EntityField, FieldCandidate]:
        """Only the fields that received a counterpart."""
        return {a: c for a, c in self.matches.items() if c is not None}

    @property
    def total_score(self) -> float:
        return sum(c.score for c in self.matches.values() if c is not None)


@dataclass(frozen=True)
class SimilarityBreakdown:
    """Entity name similarity plus the per-field mapping behind it.

    The mapping is a read-only copy, so a breakdown served from a cache
    cannot be altered by whoever received it earlier.
    """

    name_similarity: float
    field_mapping: Mapping[EntityField, FieldCandidate | None] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "field_mapping", MappingProxyType(dict(self.field_mapping))
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize with field names, for reports and logging."""
        return {
            "name_similarity": self.name_similarity,
            "fields": {
                a.name: (
                    {"field": c.field.name, "score": c.score} if c is not None else None
                )
                for a, c in self.field_mapping.items()
            },
        }
