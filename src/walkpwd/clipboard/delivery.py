"""
Clipboard delivery for walkpwd.

Walks an ordered chain of strategies and stops at the first one that
succeeds.
"""

import logging
from dataclasses import dataclass, field

from walkpwd.clipboard.exceptions import (
    ClipboardUnavailableError,
    DeliveryAttempt,
    StrategyFailedError,
)
from walkpwd.clipboard.strategies import (
    ClipboardEnvironment,
    ClipboardStrategy,
    default_strategies,
)
from walkpwd.config import ClipboardConfig, get_config

logger = logging.getLogger(__name__)


@dataclass
class ClipboardDelivery:
    """
    Delivers text to the clipboard through a fallback chain.

    Strategies that do not apply to the environment are skipped. Failed
    attempts are recorded so the final error can explain what was tried.
    """

    strategies: list[ClipboardStrategy]
    environment: ClipboardEnvironment = field(default_factory=ClipboardEnvironment.detect)
    attempts: list[DeliveryAttempt] = field(default_factory=list)

    def applicable_strategies(self) -> list[ClipboardStrategy]:
        """Strategies that apply to the captured environment, in order."""
        return [s for s in self.strategies if s.is_applicable(self.environment)]

    def deliver(self, text: str) -> str:
        """
        Put text on the clipboard.

        Args:
            text: Text to copy.

        Returns:
            Name of the strategy that succeeded.

        Raises:
            ClipboardUnavailableError: If every applicable strategy failed.
        """
        self.attempts.clear()

        for strategy in self.applicable_strategies():
            try:
                strategy.copy(text)
            except StrategyFailedError as e:
                self.attempts.append(DeliveryAttempt(strategy=strategy.name, error=e))
                logger.info(f"Clipboard strategy {strategy.name} failed: {e}")
                continue

            logger.debug(f"Clipboard strategy {strategy.name} succeeded")
            return strategy.name

        logger.warning("Clipboard fallback chain exhausted")
        raise ClipboardUnavailableError(
            "No clipboard method available.", attempts=list(self.attempts)
        )


def build_delivery(config: ClipboardConfig | None = None) -> ClipboardDelivery:
    """
    Build the default delivery chain from configuration.

    Args:
        config: ClipboardConfig. Defaults to the loaded configuration.
    """
    if config is None:
        config = get_config().clipboard

    return ClipboardDelivery(
        strategies=default_strategies(
            settle_delay=config.settle_delay,
            wait_for_exit=config.wait_for_exit,
            exit_timeout=config.exit_timeout,
            library_fallback=config.library_fallback,
        )
    )
