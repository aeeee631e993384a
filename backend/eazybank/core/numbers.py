"""Record number generators for accounts, cards and loans."""

import random
from typing import Awaitable, Callable, Optional, Protocol

from eazybank.core.constants import (
    ACCOUNT_NUMBER_FLOOR,
    RECORD_NUMBER_FLOOR,
    RECORD_NUMBER_SPAN,
)
from eazybank.core.exceptions import NumberGenerationError

# Attempts made before giving up on finding an unused number
MAX_NUMBER_ATTEMPTS = 5


class NumberGenerator(Protocol):
    """Produces candidate record numbers."""

    def next_number(self) -> int:
        ...


class RandomNumberGenerator:
    """
    Non-cryptographic generator drawing from ``[floor, floor + span)``.

    Uniqueness is not guaranteed; see ``next_unused_number``.
    """

    def __init__(self, floor: int, span: int, rng: Optional[random.Random] = None):
        if span <= 0:
            raise ValueError("span must be greater than 0")
        self.floor = floor
        self.span = span
        self._rng = rng or random.Random()

    def next_number(self) -> int:
        return self.floor + self._rng.randrange(self.span)


def account_number_generator() -> RandomNumberGenerator:
    """Generator for 10-digit account numbers."""
    return RandomNumberGenerator(ACCOUNT_NUMBER_FLOOR, RECORD_NUMBER_SPAN)


def record_number_generator() -> RandomNumberGenerator:
    """Generator for 12-digit card and loan numbers."""
    return RandomNumberGenerator(RECORD_NUMBER_FLOOR, RECORD_NUMBER_SPAN)


async def next_unused_number(
    generator: NumberGenerator,
    is_taken: Callable[[int], Awaitable[bool]],
    max_attempts: int = MAX_NUMBER_ATTEMPTS,
) -> int:
    """
    Draw numbers from ``generator`` until one is not already in use.

    Args:
        generator: Source of candidate numbers
        is_taken: Async predicate checking the store for a candidate
        max_attempts: Number of candidates tried before giving up

    Returns:
        A number for which ``is_taken`` returned False

    Raises:
        NumberGenerationError: If every candidate was already taken
    """
    for _ in range(max_attempts):
        candidate = generator.next_number()
        if not await is_taken(candidate):
            return candidate
    raise NumberGenerationError(
        f"Could not generate an unused number after {max_attempts} attempts"
    )
