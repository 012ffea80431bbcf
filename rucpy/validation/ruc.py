"""Paraguay RUC (Registro Único de Contribuyentes) validation.

Public operations
-----------------
validate(raw)          structured ``ValidRuc`` / ``InvalidRuc`` result; never raises
is_valid(raw)          boolean shortcut over ``validate``
compact(raw)           canonical digits-only string; raises ``RucFormatError``
format(raw)            display form ``"<front>-<check>"``; raises ``RucFormatError``
calc_check_digit(front)  check digit for the digits preceding it

Check digit
-----------
The digits preceding the check digit are reversed and weighted 2, 3, 4 …
from the right.  The check digit is ``(11 - sum % 11) % 10``.

Classification
--------------
``is_individual`` when the front is below 80000000.  ``is_company`` when
the front has exactly 8 digits and is above 80000000.  A front equal to
80000000 is neither.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rucpy.core.constants import (
    COMPANY_FRONT_LENGTH,
    COMPANY_THRESHOLD,
    RUC_MAX_LENGTH,
    RUC_MIN_LENGTH,
)
from rucpy.normalization.ruc_normalizer import normalize_ruc
from rucpy.validation.errors import ErrorKind, RucError, RucFormatError

logger = logging.getLogger(__name__)

_ASCII_DIGITS = frozenset("0123456789")


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidRuc:
    """Successful validation outcome.

    Attributes
    ----------
    compact:        Canonical digits-only string, check digit included.
    is_individual:  Front is below the company threshold.
    is_company:     Front has 8 digits and is above the company threshold.
    """
    compact: str
    is_individual: bool
    is_company: bool
    is_valid: bool = field(default=True, init=False)

    def to_dict(self) -> dict[str, object]:
        return {
            "is_valid": True,
            "compact": self.compact,
            "is_individual": self.is_individual,
            "is_company": self.is_company,
        }


@dataclass(frozen=True)
class InvalidRuc:
    """Failed validation outcome carrying exactly one error."""
    error: RucError
    is_valid: bool = field(default=False, init=False)

    def to_dict(self) -> dict[str, object]:
        return {"is_valid": False, "error": self.error.to_dict()}


ValidationResult = ValidRuc | InvalidRuc


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def compact(raw: str) -> str:
    """Return the canonical form of *raw*, raising ``RucFormatError`` on bad input."""
    return normalize_ruc(raw)


def format(raw: str) -> str:  # noqa: A001
    """Return *raw* in display form, e.g. ``"80028061-0"``.

    The input is normalized but not validated.  Call ``validate()`` first
    when the input may be malformed.
    """
    value = normalize_ruc(raw)
    return f"{value[:-1]}-{value[-1:]}"


def calc_check_digit(front: str) -> str:
    """Return the check digit for *front* (all digits except the last)."""
    total = sum(
        int(digit) * (idx + 2)
        for idx, digit in enumerate(reversed(front))
    )
    return str((11 - total % 11) % 10)


def _fail(kind: ErrorKind, length: int) -> InvalidRuc:
    # SAFETY: do not log raw value
    logger.debug("validate: %s (length=%d)", kind.value, length)
    return InvalidRuc(error=RucError(kind))


def validate(raw: str) -> ValidationResult:
    """Check the length, digits and check digit of *raw*.

    Returns
    -------
    ValidRuc | InvalidRuc
        ``ValidRuc`` with the classification flags on success, otherwise
        ``InvalidRuc`` with the first failure found.  Never raises for
        bad input.
    """
    try:
        value = normalize_ruc(raw)
    except RucFormatError as exc:
        return InvalidRuc(error=exc.error)

    if not RUC_MIN_LENGTH <= len(value) <= RUC_MAX_LENGTH:
        return _fail(ErrorKind.INVALID_LENGTH, len(value))
    if not set(value) <= _ASCII_DIGITS:
        return _fail(ErrorKind.INVALID_COMPONENT, len(value))

    front, check = value[:-1], value[-1]
    if check != calc_check_digit(front):
        return _fail(ErrorKind.INVALID_CHECKSUM, len(value))

    number = int(front)
    return ValidRuc(
        compact=value,
        is_individual=number < COMPANY_THRESHOLD,
        is_company=len(front) == COMPANY_FRONT_LENGTH and number > COMPANY_THRESHOLD,
    )


def is_valid(raw: str) -> bool:
    """Return True if *raw* is a valid RUC."""
    return validate(raw).is_valid
