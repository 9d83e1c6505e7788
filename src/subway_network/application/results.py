"""Tagged operation outcomes for callers that prefer values over exceptions."""

import logging
from collections.abc import Awaitable
from typing import Any

from pydantic import BaseModel, ConfigDict

from subway_network.domain.errors import ErrorKind, SubwayError
from subway_network.domain.models import ErrorDetails

logger = logging.getLogger(__name__)


class OperationResult(BaseModel):
    """Result of a service operation: either a value or error details."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Any = None
    error: ErrorDetails | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: SubwayError) -> "OperationResult":
        return cls(error=ErrorDetails.from_error(error))


async def capture(operation: Awaitable[Any]) -> OperationResult:
    """Await an operation and turn domain errors into a failed result.

    Errors that are not SubwayError propagate unchanged.
    """
    try:
        value = await operation
    except SubwayError as e:
        if e.kind is ErrorKind.CORRUPT_STATE:
            logger.error(f"Corrupt state: {e.message}")
        else:
            logger.warning(f"Operation rejected ({e.code}): {e.message}")
        return OperationResult.failure(e)
    return OperationResult.success(value)
