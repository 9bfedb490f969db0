"""Application use cases."""

from .audit_stale_keys import AuditResult, AuditStaleAccessKeys, MutationFailure, StaleUserFinding
from .enumerate_credentials import CredentialEnumerator

__all__ = [
    "AuditResult",
    "AuditStaleAccessKeys",
    "CredentialEnumerator",
    "MutationFailure",
    "StaleUserFinding",
]
