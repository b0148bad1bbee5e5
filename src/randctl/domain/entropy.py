"""Secure byte source contract.

The generators never read the platform RNG themselves. They receive an
:class:`EntropySource`, which production code binds to
:class:`randctl.infrastructure.entropy.SystemEntropySource` and tests
replace with doubles that replay or record draws.

Subclasses implement ``_read`` only. Length checking and unbiased index
sampling live here so every source shares them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from randctl.domain.errors import EntropyUnavailableError


class EntropySource(ABC):
    """Abstract source of uniformly random bytes."""

    @abstractmethod
    def _read(self, n: int) -> bytes:
        """Read up to *n* bytes from the underlying source."""

    def random_bytes(self, n: int) -> bytes:
        """Return exactly *n* uniformly random bytes.

        Raises:
            ValueError: If *n* is negative.
            EntropyUnavailableError: If the source fails or returns fewer
                than *n* bytes. A partial result is never returned.
        """
        if n < 0:
            raise ValueError(f"byte count must be >= 0, got {n}")
        if n == 0:
            return b""
        data = self._read(n)
        if len(data) != n:
            raise EntropyUnavailableError(
                f"entropy source returned {len(data)} of {n} requested bytes"
            )
        return data

    def random_index(self, bound: int) -> int:
        """Return a uniformly distributed integer in ``[0, bound)``.

        Uses rejection sampling: draw the fewest whole bytes that cover
        ``bound - 1``, mask off the unused high bits, and redraw while the
        candidate is out of range. Each attempt succeeds with probability
        above one half.

        Raises:
            ValueError: If *bound* is less than 1.
            EntropyUnavailableError: Propagated from :meth:`random_bytes`.
        """
        if bound < 1:
            raise ValueError(f"bound must be >= 1, got {bound}")
        if bound == 1:
            return 0
        bits = (bound - 1).bit_length()
        width = (bits + 7) // 8
        mask = (1 << bits) - 1
        while True:
            candidate = int.from_bytes(self.random_bytes(width), "big") & mask
            if candidate < bound:
                return candidate
