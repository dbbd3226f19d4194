"""Configuration for entity similarity scoring."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_LEADING_WORDS = frozenset({"get", "set", "is", "has"})
DEFAULT_TRAILING_WORDS = frozenset(
    {"dto", "entity", "model", "vo", "bean", "pojo", "impl", "dao", "record"}
)


@dataclass(frozen=True)
class SimilarityConfig:
    """Defaults for the similarity engine and its collaborators.

    Attributes:
        include_name: Count the entity-name similarity as one extra field
        use_semantic_oracle: Use the WordNet oracle instead of exact matching
        name_cutoff: Skip field matching when names score below this
        most_frequent_sense: Compare only the first WordNet sense of each word
        auto_download: Fetch the WordNet corpus on first use if missing
        leading_words: Role words dropped from the start of identifiers
        trailing_words: Type words dropped from the end of identifiers
    """

    include_name: bool = True
    use_semantic_oracle: bool = True
    name_cutoff: float | None = None  # disabled
    most_frequent_sense: bool = True
    auto_download: bool = False
    leading_words: frozenset[str] = field(default_factory=lambda: DEFAULT_LEADING_WORDS)
    trailing_words: frozenset[str] = field(default_factory=lambda: DEFAULT_TRAILING_WORDS)

    def __post_init__(self) -> None:
        if self.name_cutoff is not None and not 0.0 <= self.name_cutoff <= 1.0:
            raise ValueError(
                f"name_cutoff must be between 0 and 1, got {self.name_cutoff}"
            )
        # Accept any iterable of words; store lowercased frozensets.
        object.__setattr__(
            self, "leading_words", frozenset(w.lower() for w in self.leading_words)
        )
        object.__setattr__(
            self, "trailing_words", frozenset(w.lower() for w in self.trailing_words)
        )
