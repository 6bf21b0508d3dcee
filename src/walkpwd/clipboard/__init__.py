"""
walkpwd clipboard delivery.

Ordered fallback chain over platform clipboard helpers and pyperclip.
"""

from walkpwd.clipboard.delivery import ClipboardDelivery, build_delivery
from walkpwd.clipboard.exceptions import (
    ClipboardError,
    ClipboardUnavailableError,
    DeliveryAttempt,
    StrategyFailedError,
)
from walkpwd.clipboard.strategies import (
    ClipboardEnvironment,
    ClipboardStrategy,
    CommandStrategy,
    LibraryStrategy,
    default_strategies,
)

__all__ = [
    "ClipboardDelivery",
    "ClipboardEnvironment",
    "ClipboardError",
    "ClipboardStrategy",
    "ClipboardUnavailableError",
    "CommandStrategy",
    "DeliveryAttempt",
    "LibraryStrategy",
    "StrategyFailedError",
    "build_delivery",
    "default_strategies",
]
