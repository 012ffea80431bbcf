"""Error kinds reported by RUC validation.

Errors are plain values: an ``ErrorKind`` plus a human-readable message.
``validate()`` returns them inside ``InvalidRuc``; only ``compact()`` and
``format()`` raise, wrapping the value in ``RucFormatError`` because they
have no structured failure channel.

Error kinds
-----------
INVALID_FORMAT    : raw input contains uncleanable unicode content
INVALID_LENGTH    : canonical string length outside [5, 9]
INVALID_COMPONENT : canonical string contains a non-digit character
INVALID_CHECKSUM  : trailing check digit does not match the computed one
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"
    INVALID_LENGTH = "invalid_length"
    INVALID_COMPONENT = "invalid_component"
    INVALID_CHECKSUM = "invalid_checksum"


_DEFAULT_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_FORMAT: "The number has an invalid format.",
    ErrorKind.INVALID_LENGTH: "The number has an invalid length.",
    ErrorKind.INVALID_COMPONENT: "One of the parts of the number is invalid or unknown.",
    ErrorKind.INVALID_CHECKSUM: "The number's internal checksum or check digit does not match.",
}


@dataclass(frozen=True)
class RucError:
    """A single validation failure."""

    kind: ErrorKind
    message: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", _DEFAULT_MESSAGES[self.kind])

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class RucFormatError(ValueError):
    """Raised by ``compact()`` and ``format()`` when input cannot be cleaned."""

    def __init__(self, error: RucError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
