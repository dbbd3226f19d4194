"""Entity similarity package: field correspondence between data entities."""

from entity_similarity.similarity.cache import LastPairCache, NullPairCache
from entity_similarity.similarity.config import SimilarityConfig
from entity_similarity.similarity.engine import EntitySimilarityEngine
from entity_similarity.similarity.normalizer import NameNormalizer, split_identifier
from entity_similarity.similarity.oracles import ExactMatchOracle, WordNetOracle
from entity_similarity.similarity.resolver import StableCorrespondenceResolver
from entity_similarity.similarity.scorer import PairwiseFieldScorer, SimilarityMatrix

__all__ = [
    "EntitySimilarityEngine",
    "ExactMatchOracle",
    "LastPairCache",
    "NameNormalizer",
    "NullPairCache",
    "PairwiseFieldScorer",
    "SimilarityConfig",
    "SimilarityMatrix",
    "StableCorrespondenceResolver",
    "WordNetOracle",
    "split_identifier",
]
