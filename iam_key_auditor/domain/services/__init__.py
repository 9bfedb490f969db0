"""Domain services - Stateless operations on domain objects."""

from .staleness_classifier import StalenessClassifier, classify, most_recently_used

__all__ = ["StalenessClassifier", "classify", "most_recently_used"]
