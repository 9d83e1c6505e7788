"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

from subway_network.domain.errors import ErrorKind, SubwayError


class ErrorDetails(BaseModel):
    """Details about a failed operation: its category, stable code and message."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    code: str
    reason: str

    @classmethod
    def from_error(cls, error: SubwayError) -> "ErrorDetails":
        return cls(kind=error.kind, code=error.code, reason=error.message)
