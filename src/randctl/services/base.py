"""BaseService — shared foundation for randctl services.

Every service receives its EntropySource and settings at construction
time. The source is a capability: production passes a
``SystemEntropySource``, tests pass deterministic doubles.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from randctl.domain.errors import EntropyUnavailableError, InvalidConstraintError
from randctl.services.result import ServiceResult

if TYPE_CHECKING:
    from randctl.config.settings import RandSettings
    from randctl.domain.entropy import EntropySource

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class GenerateService(BaseService):
            def generate_id(self, byte_length: int) -> ServiceResult:
                ...generate_identifier(request, self._source)...
    """

    def __init__(self, source: EntropySource, settings: RandSettings | None = None) -> None:
        if settings is None:
            from randctl.config.settings import RandSettings

            settings = RandSettings()
        self._source = source
        self._settings = settings

    @staticmethod
    def _domain_failure(
        op: str,
        exc: InvalidConstraintError | EntropyUnavailableError,
    ) -> ServiceResult:
        """Translate a domain exception into a failed ServiceResult.

        INVARIANT: entropy failures are reported, never retried.
        """
        if isinstance(exc, InvalidConstraintError):
            detail = {} if exc.shortfall is None else {"shortfall": exc.shortfall}
            return ServiceResult.failure(op, "INVALID_CONSTRAINT", str(exc), **detail)

        cause = exc.__cause__
        logger.warning("Entropy unavailable during %s: %s", op, exc)
        detail = {"cause": repr(cause)} if cause is not None else {}
        return ServiceResult.failure(op, "ENTROPY_UNAVAILABLE", str(exc), **detail)
