"""StableCorrespondenceResolver: greedy one-to-one field matching."""

from __future__ import annotations

import logging

from entity_similarity.core.types import Correspondence, EntityField
from entity_similarity.similarity.scorer import SimilarityMatrix

logger = logging.getLogger(__name__)


class StableCorrespondenceResolver:
    """Resolves a similarity matrix into an injective field mapping.

    Fields of the first entity are scanned in declaration order, each
    claiming its best remaining candidate:

    - an unclaimed candidate is taken;
    - a candidate held with a strictly lower score is taken over, the
      previous holder loses it for good and the scan restarts;
    - otherwise the field drops that candidate and tries its next best.

    The scan repeats until one full pass revokes nothing. Every conflict
    removes one candidate permanently, so there are at most |A| x |B|
    restarts, but each restart rescans from the top: cost is not linear.
    The result is conflict free, not a maximum-weight matching.
    """

    def resolve(self, matrix: SimilarityMatrix) -> Correspondence:
        passes = 0
        revocations = 0
        changed = bool(matrix.fields_a and matrix.fields_b)

        while changed:
            changed = False
            passes += 1
            # B-field -> (score, claiming A-field)
            claims: dict[EntityField, tuple[float, EntityField]] = {}

            for a_field in matrix.fields_a:
                remaining = matrix.candidates(a_field)
                while remaining:
                    best = remaining[0]
                    holder = claims.get(best.field)
                    if holder is None:
                        claims[best.field] = (best.score, a_field)
                        break

                    held_score, held_by = holder
                    if best.score > held_score:
                        matrix.discard(held_by, best.field)
                        claims[best.field] = (best.score, a_field)
                        revocations += 1
                        changed = True
                        break

                    matrix.discard(a_field, best.field)

                if changed:
                    break

        matches = {a_field: matrix.best(a_field) for a_field in matrix.fields_a}
        logger.debug(
            "Resolved %d fields against %d in %d pass(es), %d revocation(s)",
            len(matrix.fields_a),
            len(matrix.fields_b),
            passes,
            revocations,
        )
        return Correspondence(matches=matches, passes=passes, revocations=revocations)
