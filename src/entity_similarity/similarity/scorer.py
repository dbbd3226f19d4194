"""Pairwise field scoring into a ranked similarity matrix."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence

import numpy as np

from entity_similarity.core.protocols import WordSimilarityOracle
from entity_similarity.core.types import EntityField, FieldCandidate, PartOfSpeech
from entity_similarity.similarity.normalizer import NameNormalizer
from entity_similarity.similarity.oracles import ExactMatchOracle

logger = logging.getLogger(__name__)


class SimilarityMatrix:
    """Ranked candidates of the second entity for each field of the first.

    Candidate lists are sorted by descending score; equal scores keep the
    declaration order of the second entity's fields. The lists are consumed
    in place by the resolver, while the raw score grid stays untouched.
    """

    def __init__(
        self,
        fields_a: Sequence[EntityField],
        fields_b: Sequence[EntityField],
        scores: Sequence[Sequence[float]],
    ) -> None:
        self.fields_a = list(fields_a)
        self.fields_b = list(fields_b)
        self._scores = [list(row) for row in scores]
        self._candidates: dict[EntityField, list[FieldCandidate]] = {}
        for a_field, row in zip(self.fields_a, self._scores):
            ranked = [FieldCandidate(s, b) for s, b in zip(row, self.fields_b)]
            # sorted() is stable, so ties stay in declaration order
            self._candidates[a_field] = sorted(
                ranked, key=lambda c: c.score, reverse=True
            )

    def candidates(self, a_field: EntityField) -> list[FieldCandidate]:
        """Live candidate list for a field; mutations are visible."""
        return self._candidates[a_field]

    def best(self, a_field: EntityField) -> FieldCandidate | None:
        remaining = self._candidates[a_field]
        return remaining[0] if remaining else None

    def discard(self, a_field: EntityField, b_field: EntityField) -> None:
        """Remove ``b_field`` from the candidates of ``a_field``."""
        remaining = self._candidates[a_field]
        remaining[:] = [c for c in remaining if c.field is not b_field]

    def score(self, a_field: EntityField, b_field: EntityField) -> float:
        """Original score of a pair, regardless of resolution progress."""
        row = self.fields_a.index(a_field)
        col = self.fields_b.index(b_field)
        return self._scores[row][col]

    def as_array(self) -> np.ndarray:
        """Score grid with one row per first-entity field."""
        return np.array(self._scores, dtype=float).reshape(
            len(self.fields_a), len(self.fields_b)
        )

    def items(self) -> Iterator[tuple[EntityField, list[FieldCandidate]]]:
        for a_field in self.fields_a:
            yield a_field, self._candidates[a_field]

    def __len__(self) -> int:
        return len(self.fields_a)


class PairwiseFieldScorer:
    """Scores every field of one entity against every field of another.

    Names are normalized before the oracle sees them. Oracle failures and
    out-of-range scores never escape: a raising oracle scores 0.0 and any
    returned value is clamped into [0, 1].
    """

    def __init__(
        self,
        semantic_oracle: WordSimilarityOracle,
        exact_oracle: WordSimilarityOracle | None = None,
        normalizer: NameNormalizer | None = None,
    ) -> None:
        self._semantic_oracle = semantic_oracle
        self._exact_oracle = exact_oracle or ExactMatchOracle()
        self._normalizer = normalizer or NameNormalizer()

    def oracle_for(self, use_semantic_oracle: bool) -> WordSimilarityOracle:
        return self._semantic_oracle if use_semantic_oracle else self._exact_oracle

    def name_similarity(self, one: str, two: str, use_semantic_oracle: bool) -> float:
        """Similarity of two identifiers, treated as nouns."""
        return self._token_similarity(
            self.oracle_for(use_semantic_oracle),
            self._normalizer.normalize(one),
            self._normalizer.normalize(two),
        )

    def local_field_similarity(
        self,
        field_one: EntityField,
        field_two: EntityField,
        use_semantic_oracle: bool,
    ) -> float:
        return self.name_similarity(field_one.name, field_two.name, use_semantic_oracle)

    def score(
        self,
        fields_a: Sequence[EntityField],
        fields_b: Sequence[EntityField],
        use_semantic_oracle: bool,
    ) -> SimilarityMatrix:
        """Build the full |A| x |B| matrix."""
        oracle = self.oracle_for(use_semantic_oracle)
        tokens_b = [self._normalizer.normalize(b.name) for b in fields_b]
        scores = [
            [
                self._token_similarity(oracle, token_a, token_b)
                for token_b in tokens_b
            ]
            for token_a in (self._normalizer.normalize(a.name) for a in fields_a)
        ]
        return SimilarityMatrix(fields_a, fields_b, scores)

    @staticmethod
    def _token_similarity(
        oracle: WordSimilarityOracle, token_a: str, token_b: str
    ) -> float:
        try:
            score = float(
                oracle.similarity(token_a, PartOfSpeech.NOUN, token_b, PartOfSpeech.NOUN)
            )
        except Exception:
            logger.warning(
                "Similarity oracle failed for %r/%r, scoring 0.0",
                token_a,
                token_b,
                exc_info=True,
            )
            return 0.0
        if math.isnan(score):
            return 0.0
        return max(0.0, min(1.0, score))
