# logic/bit_cartesian.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Lazy enumeration of boolean vectors in binary counting order

"""Bit-cartesian product of ``width`` boolean positions.

Produces every boolean vector of a fixed width by counting from 0 to
``2**width - 1``; position 0 of each vector holds the most significant bit.
For a width of 3 the order is FFF, FFT, FTF, FTT, TFF, TFT, TTF, TTT.

A width of 0 produces no vectors at all, not a single empty vector.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class BitCartesian:
    """Finite, restartable iterable of boolean vectors.

    Every call to ``iter()`` starts a fresh counter, so the same instance can
    be traversed repeatedly and always reproduces the same order.

    Attributes:
        width: Number of boolean positions per vector
    """

    width: int

    def __post_init__(self):
        if self.width < 0:
            raise ValueError(f"Width must be non-negative, got {self.width}")

    @property
    def count(self) -> int:
        """Number of vectors produced, without the size limit of ``len()``."""
        if self.width == 0:
            return 0
        return 1 << self.width

    def __len__(self) -> int:
        # len() cannot report counts above sys.maxsize (width 63 and up)
        return self.count

    def __iter__(self) -> Iterator[Tuple[bool, ...]]:
        for counter in range(self.count):
            yield self.vector(counter)

    def vector(self, counter: int) -> Tuple[bool, ...]:
        """Decode a counter value into its boolean vector.

        Args:
            counter: Value in ``range(self.count)``

        Returns:
            Tuple of ``width`` booleans, most significant bit first
        """
        return tuple(
            bool(counter >> shift & 1) for shift in range(self.width - 1, -1, -1)
        )
