"""
Clipboard exceptions for walkpwd.
"""

from dataclasses import dataclass


class ClipboardError(Exception):
    """Base exception for clipboard errors."""

    pass


class StrategyFailedError(ClipboardError):
    """A single delivery strategy could not place the text on the clipboard."""

    def __init__(self, message: str, strategy: str | None = None):
        super().__init__(message)
        self.strategy = strategy


@dataclass
class DeliveryAttempt:
    """Record of a failed strategy attempt."""

    strategy: str
    error: Exception


class ClipboardUnavailableError(ClipboardError):
    """Every strategy in the fallback chain failed or was not applicable."""

    def __init__(self, message: str, attempts: list[DeliveryAttempt] | None = None):
        super().__init__(message)
        self.attempts = attempts or []

    def get_attempt_summary(self) -> str:
        """
        Get a human-readable summary of the failed attempts.

        Returns:
            Summary string describing which strategies were tried.
        """
        if not self.attempts:
            return "No applicable clipboard strategy"

        lines = [f"  - {attempt.strategy}: {attempt.error}" for attempt in self.attempts]
        return "Clipboard attempts:\n" + "\n".join(lines)
