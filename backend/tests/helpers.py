"""Shared test doubles and sample values."""

from typing import Iterable

MOBILE_NUMBER = "9876543210"
OTHER_MOBILE_NUMBER = "9123456780"


class SequenceNumberGenerator:
    """Number generator returning a fixed sequence, for predictable tests."""

    def __init__(self, numbers: Iterable[int]):
        self._numbers = iter(numbers)
        self.calls = 0

    def next_number(self) -> int:
        self.calls += 1
        return next(self._numbers)
