"""Domain error taxonomy.

Each error knows the HTTP status it surfaces as, so the API layer can
translate it without inspecting the concrete type.
"""

from __future__ import annotations


class AnalyzerError(Exception):
    status_code: int = 500

    def __init__(self, error: str, details: str | None = None):
        super().__init__(error if details is None else f"{error}: {details}")
        self.error = error
        self.details = details


class BadRequest(AnalyzerError):
    """Caller input is invalid (missing task/text, no Q&A context, ...)."""

    status_code = 400


class ConfigurationError(AnalyzerError):
    """A required credential or setting is missing."""

    status_code = 500


class UpstreamError(AnalyzerError):
    """The completion service answered non-2xx or could not be reached."""

    status_code = 500

    def __init__(self, status: int | None, body: str):
        label = f"Completion service error: {status}" if status else "Completion service unreachable"
        super().__init__(label, body)
        self.status = status
        self.body = body


class StoreError(AnalyzerError):
    """A persisted-record read or write failed."""

    status_code = 500
