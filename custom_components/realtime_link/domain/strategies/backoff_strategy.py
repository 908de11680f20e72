"""Reconnect delay strategies using Strategy pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from ...const import (
    BACKOFF_EXPONENTIAL,
    BACKOFF_FIXED,
    BACKOFF_NONE,
    DEFAULT_RECONNECT_DELAY,
    MAX_BACKOFF,
)


class BackoffStrategy(ABC):
    """Abstract strategy for automatic reconnect delays."""

    @abstractmethod
    def delay(self, attempt: int) -> Optional[float]:
        """Get delay before automatic reconnect attempt.

        Args:
            attempt: 1-based number of the retry since the last successful open

        Returns:
            Delay in seconds, or None to stop retrying
        """


class NoRetry(BackoffStrategy):
    """Never reconnect automatically."""

    def delay(self, attempt: int) -> Optional[float]:
        """Always stop."""
        return None

    def __repr__(self) -> str:
        return "NoRetry()"


class FixedDelay(BackoffStrategy):
    """Reconnect after the same delay every time."""

    def __init__(
        self, seconds: float = DEFAULT_RECONNECT_DELAY, max_attempts: Optional[int] = None
    ):
        if seconds < 0:
            raise ValueError(f"Invalid delay: {seconds}. Must be >= 0.")
        self.seconds = seconds
        self.max_attempts = max_attempts

    def delay(self, attempt: int) -> Optional[float]:
        """Return fixed delay until max_attempts is exhausted."""
        if self.max_attempts is not None and attempt > self.max_attempts:
            return None
        return self.seconds

    def __repr__(self) -> str:
        return f"FixedDelay(seconds={self.seconds}, max_attempts={self.max_attempts})"


class ExponentialBackoff(BackoffStrategy):
    """Double the delay on every attempt, capped at ``maximum``.

    Example:
        >>> strategy = ExponentialBackoff(initial=1.0, maximum=8.0)
        >>> [strategy.delay(n) for n in range(1, 6)]
        [1.0, 2.0, 4.0, 8.0, 8.0]
    """

    def __init__(
        self,
        initial: float = 1.0,
        maximum: float = MAX_BACKOFF,
        factor: float = 2.0,
        max_attempts: Optional[int] = None,
    ):
        if initial <= 0 or maximum < initial:
            raise ValueError(
                f"Invalid backoff bounds: initial={initial}, maximum={maximum}"
            )
        if factor < 1:
            raise ValueError(f"Invalid backoff factor: {factor}. Must be >= 1.")
        self.initial = initial
        self.maximum = maximum
        self.factor = factor
        self.max_attempts = max_attempts

    def delay(self, attempt: int) -> Optional[float]:
        """Return exponentially growing delay."""
        if self.max_attempts is not None and attempt > self.max_attempts:
            return None
        return min(self.initial * self.factor ** (attempt - 1), self.maximum)

    def __repr__(self) -> str:
        return (
            f"ExponentialBackoff(initial={self.initial}, maximum={self.maximum}, "
            f"factor={self.factor}, max_attempts={self.max_attempts})"
        )


class BackoffFactory:
    """Factory for creating backoff strategies by name."""

    _strategies = {
        BACKOFF_NONE: NoRetry,
        BACKOFF_FIXED: FixedDelay,
        BACKOFF_EXPONENTIAL: ExponentialBackoff,
    }

    @classmethod
    def create(cls, name: str, **options: Any) -> BackoffStrategy:
        """Create strategy for name.

        Args:
            name: Strategy name ("none", "fixed", "exponential")
            **options: Constructor arguments for the strategy

        Returns:
            BackoffStrategy instance

        Raises:
            ValueError: If name is not known
        """
        strategy_class = cls._strategies.get(name)
        if strategy_class is None:
            raise ValueError(f"Unknown backoff strategy: {name}")
        if strategy_class is NoRetry:
            return NoRetry()
        return strategy_class(**options)


def create_backoff(name: str, **options: Any) -> BackoffStrategy:
    """Create a backoff strategy by name."""
    return BackoffFactory.create(name, **options)
