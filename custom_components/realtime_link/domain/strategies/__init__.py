"""Domain strategies."""

from .backoff_strategy import (
    BackoffStrategy,
    NoRetry,
    FixedDelay,
    ExponentialBackoff,
    BackoffFactory,
    create_backoff,
)

__all__ = [
    "BackoffStrategy",
    "NoRetry",
    "FixedDelay",
    "ExponentialBackoff",
    "BackoffFactory",
    "create_backoff",
]
