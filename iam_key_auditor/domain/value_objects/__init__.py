"""Domain value objects - Immutable objects defined by their attributes."""

from .enrichment_failure_policy import EnrichmentFailurePolicy
from .key_status import KeyStatus
from .retention_window import RetentionWindow
from .run_mode import RunMode
from .staleness_verdict import StalenessVerdict

__all__ = [
    "EnrichmentFailurePolicy",
    "KeyStatus",
    "RetentionWindow",
    "RunMode",
    "StalenessVerdict",
]
