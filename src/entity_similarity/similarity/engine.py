"""EntitySimilarityEngine: orchestrates name scoring, field matching and caching."""

from __future__ import annotations

import logging

from entity_similarity.core.protocols import PairCache, WordSimilarityOracle
from entity_similarity.core.types import Entity, EntityField, SimilarityBreakdown
from entity_similarity.similarity.cache import LastPairCache
from entity_similarity.similarity.config import SimilarityConfig
from entity_similarity.similarity.normalizer import NameNormalizer
from entity_similarity.similarity.oracles import WordNetOracle
from entity_similarity.similarity.resolver import StableCorrespondenceResolver
from entity_similarity.similarity.scorer import PairwiseFieldScorer

logger = logging.getLogger(__name__)


class EntitySimilarityEngine:
    """Scores how alike two entities are and which fields correspond.

    The entity names count as one extra "field" in the average when
    ``include_name`` is set. Field scores come from a greedy one-to-one
    correspondence, so unmatched fields of the first entity pull the score
    down and the result is not symmetric in its arguments.

    The cache is injected and owned by the caller. By default a
    ``LastPairCache`` remembers only the most recent pair; pass a
    ``NullPairCache`` to disable caching.

    Example:
        >>> engine = EntitySimilarityEngine(
        ...     SimilarityConfig(use_semantic_oracle=False)
        ... )
        >>> order = Entity("Order", [EntityField("id"), EntityField("amount")])
        >>> dto = Entity("OrderDTO", [EntityField("id"), EntityField("getAmount")])
        >>> engine.calculate_similarity(order, dto)
        1.0
    """

    def __init__(
        self,
        config: SimilarityConfig | None = None,
        *,
        semantic_oracle: WordSimilarityOracle | None = None,
        exact_oracle: WordSimilarityOracle | None = None,
        cache: PairCache | None = None,
        resolver: StableCorrespondenceResolver | None = None,
    ) -> None:
        self.config = config or SimilarityConfig()
        self.normalizer = NameNormalizer(
            self.config.leading_words, self.config.trailing_words
        )
        if semantic_oracle is None:
            semantic_oracle = WordNetOracle(
                most_frequent_sense=self.config.most_frequent_sense,
                auto_download=self.config.auto_download,
            )
        self.scorer = PairwiseFieldScorer(semantic_oracle, exact_oracle, self.normalizer)
        self.resolver = resolver or StableCorrespondenceResolver()
        self.cache = cache if cache is not None else LastPairCache()

    def calculate_similarity(
        self,
        entity_one: Entity,
        entity_two: Entity,
        include_name: bool | None = None,
        use_semantic_oracle: bool | None = None,
    ) -> float:
        """Average of the name score and the matched field scores, in [0, 1]."""
        if include_name is None:
            include_name = self.config.include_name

        breakdown = self.global_field_similarity(
            entity_one, entity_two, use_semantic_oracle
        )

        total = breakdown.name_similarity if include_name else 0.0
        count = 1 if include_name else 0
        for match in breakdown.field_mapping.values():
            count += 1
            if match is not None:
                total += match.score

        if count == 0:
            return 0.0
        return total / count

    def global_field_similarity(
        self,
        entity_one: Entity,
        entity_two: Entity,
        use_semantic_oracle: bool | None = None,
    ) -> SimilarityBreakdown:
        """Name similarity plus the field correspondence of two entities.

        Served from the cache when called again with the very same entity
        objects and oracle mode. Pairs where neither entity has fields are
        not cached: they cost one name lookup, and a repeat call makes it
        again.
        """
        if use_semantic_oracle is None:
            use_semantic_oracle = self.config.use_semantic_oracle

        cached = self.cache.get(entity_one, entity_two, use_semantic_oracle)
        if cached is not None:
            logger.debug(
                "Cache hit for %s/%s", entity_one.name, entity_two.name
            )
            return cached
        logger.debug("Cache miss for %s/%s", entity_one.name, entity_two.name)

        fields_one = entity_one.fields or []
        fields_two = entity_two.fields or []

        name_similarity = self.scorer.name_similarity(
            entity_one.name, entity_two.name, use_semantic_oracle
        )

        if not fields_one and not fields_two:
            return SimilarityBreakdown(name_similarity, {})

        cutoff = self.config.name_cutoff
        if cutoff is not None and name_similarity < cutoff:
            logger.debug(
                "Names %s/%s below cutoff (%.3f < %.3f), skipping fields",
                entity_one.name,
                entity_two.name,
                name_similarity,
                cutoff,
            )
            breakdown = SimilarityBreakdown(
                name_similarity, {f: None for f in fields_one}
            )
        else:
            matrix = self.scorer.score(fields_one, fields_two, use_semantic_oracle)
            correspondence = self.resolver.resolve(matrix)
            breakdown = SimilarityBreakdown(name_similarity, correspondence.matches)

        self.cache.put(entity_one, entity_two, use_semantic_oracle, breakdown)
        return breakdown

    def name_similarity(
        self, one: str, two: str, use_semantic_oracle: bool | None = None
    ) -> float:
        if use_semantic_oracle is None:
            use_semantic_oracle = self.config.use_semantic_oracle
        return self.scorer.name_similarity(one, two, use_semantic_oracle)

    def local_field_similarity(
        self,
        field_one: EntityField,
        field_two: EntityField,
        use_semantic_oracle: bool | None = None,
    ) -> float:
        if use_semantic_oracle is None:
            use_semantic_oracle = self.config.use_semantic_oracle
        return self.scorer.local_field_similarity(
            field_one, field_two, use_semantic_oracle
        )
