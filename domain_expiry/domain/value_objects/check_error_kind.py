"""Check error kind value object."""

from enum import StrEnum, auto


class CheckErrorKind(StrEnum):
    """Classification of a failed domain check."""

    INVALID_INPUT = auto()
    NOT_FOUND = auto()
    INVALID_DATA = auto()
    BACKEND_ERROR = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def http_status(self) -> int:
        """HTTP status code reported for this kind."""
        match self:
            case CheckErrorKind.INVALID_INPUT:
                return 400
            case CheckErrorKind.NOT_FOUND | CheckErrorKind.INVALID_DATA:
                return 404
            case CheckErrorKind.BACKEND_ERROR:
                return 500
