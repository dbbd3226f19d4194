"""Core types and protocols for entity similarity."""

from entity_similarity.core.types import (
    Correspondence,
    Entity,
    EntityField,
    FieldCandidate,
    PartOfSpeech,
    SimilarityBreakdown,
)
from entity_similarity.core.protocols import (
    PairCache,
    WordSimilarityOracle,
)
from entity_similarity.core.exceptions import (
    OracleError,
    SimilarityError,
)

__all__ = [
    # Types
    "Correspondence",
    "Entity",
    "EntityField",
    "FieldCandidate",
    "PartOfSpeech",
    "SimilarityBreakdown",
    # Protocols
    "PairCache",
    "WordSimilarityOracle",
    # Exceptions
    "OracleError",
    "SimilarityError",
]
