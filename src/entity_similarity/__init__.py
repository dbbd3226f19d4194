"""Entity Similarity - field correspondence between extracted data entities.

Part of an architecture recovery toolchain: given two entities (a name and
an ordered list of fields) pulled out of different services, score how
alike they are and which fields correspond, with:
- Identifier normalization (getters, DTO suffixes, camelCase)
- Pluggable word similarity (exact match or WordNet Wu-Palmer)
- Greedy, conflict-free one-to-one field matching
- An injectable cache for the most recently compared pair

Example:
    >>> from entity_similarity import Entity, EntityField, EntitySimilarityEngine
    >>>
    >>> engine = EntitySimilarityEngine()
    >>> order = Entity("Order", [EntityField("id"), EntityField("price")])
    >>> invoice = Entity("InvoiceDTO", [EntityField("id"), EntityField("getCost")])
    >>>
    >>> score = engine.calculate_similarity(order, invoice)
    >>> breakdown = engine.global_field_similarity(order, invoice)
    >>> breakdown.to_dict()["fields"]["price"]
"""

from entity_similarity.core.types import (
    Correspondence,
    Entity,
    EntityField,
    FieldCandidate,
    PartOfSpeech,
    SimilarityBreakdown,
)
from entity_similarity.core.protocols import PairCache, WordSimilarityOracle
from entity_similarity.core.exceptions import OracleError, SimilarityError
from entity_similarity.similarity import (
    EntitySimilarityEngine,
    ExactMatchOracle,
    LastPairCache,
    NameNormalizer,
    NullPairCache,
    PairwiseFieldScorer,
    SimilarityConfig,
    SimilarityMatrix,
    StableCorrespondenceResolver,
    WordNetOracle,
)

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "EntitySimilarityEngine",
    "SimilarityConfig",
    # Core types
    "Correspondence",
    "Entity",
    "EntityField",
    "FieldCandidate",
    "PartOfSpeech",
    "SimilarityBreakdown",
    # Components
    "NameNormalizer",
    "PairwiseFieldScorer",
    "SimilarityMatrix",
    "StableCorrespondenceResolver",
    # Oracles
    "ExactMatchOracle",
    "WordNetOracle",
    "WordSimilarityOracle",
    # Caching
    "LastPairCache",
    "NullPairCache",
    "PairCache",
    # Exceptions
    "OracleError",
    "SimilarityError",
]
