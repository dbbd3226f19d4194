"""Custom exceptions for entity similarity."""


class SimilarityError(Exception):
    """Base exception for similarity operations."""

    pass


class OracleError(SimilarityError):
    """Raised by an oracle backend that cannot produce a score.

    Scorers catch this and degrade the affected pair to 0.0.
    """

    def __init__(self, backend: str, message: str = ""):
        self.backend = backend
        super().__init__(message or f"Similarity oracle failed: {backend}")
