"""Word similarity oracles: exact matching and WordNet Wu-Palmer."""

from __future__ import annotations

import logging

import nltk
from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import WordNetError

from entity_similarity.core.exceptions import OracleError
from entity_similarity.core.types import PartOfSpeech

logger = logging.getLogger(__name__)

WORDNET_RESOURCE = "corpora/wordnet"


class ExactMatchOracle:
    """Degraded oracle: 1.0 for case-insensitive equality, else 0.0."""

    def similarity(
        self,
        token_a: str,
        pos_a: PartOfSpeech,
        token_b: str,
        pos_b: PartOfSpeech,
    ) -> float:
        return 1.0 if token_a.lower() == token_b.lower() else 0.0


class WordNetOracle:
    """Wu-Palmer similarity over WordNet synsets.

    The score is the best Wu-Palmer relatedness between any sense of the
    first token and any sense of the second. With ``most_frequent_sense``
    only the first (most frequent) sense of each token is compared.

    Tokens WordNet does not know score 0.0. A missing corpus also scores
    0.0; it is logged once per oracle instance. Identical tokens score 1.0
    even when WordNet does not know them.
    """

    def __init__(
        self,
        most_frequent_sense: bool = True,
        auto_download: bool = False,
    ) -> None:
        self._most_frequent_sense = most_frequent_sense
        self._auto_download = auto_download
        self._corpus_ready = False
        self._warned = False

    def similarity(
        self,
        token_a: str,
        pos_a: PartOfSpeech,
        token_b: str,
        pos_b: PartOfSpeech,
    ) -> float:
        if not token_a or not token_b:
            return 0.0
        if token_a.lower() == token_b.lower():
            return 1.0

        try:
            self._ensure_corpus()
            return self._wup(token_a.lower(), pos_a, token_b.lower(), pos_b)
        except (OracleError, LookupError) as e:
            if not self._warned:
                logger.warning("WordNet unavailable, scoring 0.0: %s", e)
                self._warned = True
            return 0.0

    def _ensure_corpus(self) -> None:
        """Locate the WordNet corpus, downloading it when allowed."""
        if self._corpus_ready:
            return
        try:
            nltk.data.find(WORDNET_RESOURCE)
        except LookupError:
            if not self._auto_download:
                raise OracleError("wordnet", "WordNet corpus is not installed")
            logger.info("Downloading WordNet corpus")
            if not nltk.download("wordnet", quiet=True):
                raise OracleError("wordnet", "WordNet corpus download failed")
        self._corpus_ready = True

    def _senses(self, token: str, pos: PartOfSpeech) -> list:
        synsets = wn.synsets(token, pos=pos.value)
        if self._most_frequent_sense:
            return synsets[:1]
        return synsets

    def _wup(
        self,
        token_a: str,
        pos_a: PartOfSpeech,
        token_b: str,
        pos_b: PartOfSpeech,
    ) -> float:
        best = 0.0
        senses_b = self._senses(token_b, pos_b)
        for sense_a in self._senses(token_a, pos_a):
            for sense_b in senses_b:
                try:
                    score = sense_a.wup_similarity(sense_b)
                except WordNetError:
                    # senses of different parts of speech have no common root
                    continue
                if score is not None and score > best:
                    best = score
        return min(best, 1.0)
