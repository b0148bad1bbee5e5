"""Platform bindings for the EntropySource contract.

``SystemEntropySource`` reads ``os.urandom``, which is safe for concurrent
use and never blocks once the kernel pool is initialised. Failures are
surfaced immediately as :class:`EntropyUnavailableError` and never retried.
"""

from __future__ import annotations

import os

from randctl.domain.entropy import EntropySource
from randctl.domain.errors import EntropyUnavailableError


class SystemEntropySource(EntropySource):
    """Entropy from the operating system's CSPRNG."""

    def _read(self, n: int) -> bytes:
        try:
            return os.urandom(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(f"system entropy source failed: {exc}") from exc


class MeteredEntropySource(EntropySource):
    """Wrap another source and count the bytes it delivers.

    Used by services to annotate telemetry spans with entropy consumption.
    """

    def __init__(self, inner: EntropySource) -> None:
        self._inner = inner
        self.bytes_read = 0
        self.reads = 0

    def _read(self, n: int) -> bytes:
        data = self._inner.random_bytes(n)
        self.bytes_read += len(data)
        self.reads += 1
        return data
