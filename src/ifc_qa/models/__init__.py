"""QA result models."""

from ifc_qa.models.issues import Issue, RunResult, Severity, ValueSource

__all__ = [
    "Issue",
    "RunResult",
    "Severity",
    "ValueSource",
]
