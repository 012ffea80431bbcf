"""RUC normalizer.

Produces the canonical string fed to the validator and formatter.

Rules applied in order
----------------------
1. Reject non-``str`` input, unpaired surrogates and non-whitespace
   control characters (NUL, BEL, ESC …) with ``INVALID_FORMAT``.
2. Drop the separators (space, hyphen), every other unicode whitespace
   character, every unicode dash and every invisible format character
   (zero-width space, BOM …).
3. Fold compatibility forms with NFKC so full-width digits become ASCII.

No length or digit-class checks happen here.

Safety rule: raw values are never logged.
"""
from __future__ import annotations

import logging
import unicodedata

from rucpy.core.constants import SEPARATORS
from rucpy.validation.errors import ErrorKind, RucError, RucFormatError

logger = logging.getLogger(__name__)

# U+2212 MINUS SIGN is category Sm, not Pd.
_EXTRA_DASHES = frozenset({"\u2212"})


def _is_removable(char: str) -> bool:
    """Return True if *char* is a separator or an invisible variant of one."""
    if char in SEPARATORS or char.isspace() or char in _EXTRA_DASHES:
        return True
    category = unicodedata.category(char)
    return category in ("Pd", "Cf")


def _check_clean(raw: str) -> None:
    for char in raw:
        category = unicodedata.category(char)
        if category == "Cs":
            raise RucFormatError(
                RucError(ErrorKind.INVALID_FORMAT, "The number contains an unpaired surrogate.")
            )
        if category == "Cc" and not char.isspace():
            raise RucFormatError(
                RucError(ErrorKind.INVALID_FORMAT, "The number contains a control character.")
            )


def normalize_ruc(raw: str) -> str:
    """Return the canonical form of *raw*.

    Parameters
    ----------
    raw:
        Raw RUC string, possibly with spaces, hyphens or unicode
        lookalikes (``"80028061-0"``, ``"８００２８０６１ ０"``).

    Returns
    -------
    str
        *raw* with every separator removed and compatibility characters
        folded.  The result is not guaranteed to be digits-only or of a
        valid length.

    Raises
    ------
    RucFormatError
        With kind ``INVALID_FORMAT`` when *raw* is not a string or holds
        an unpaired surrogate or a disallowed control character.
    """
    if not isinstance(raw, str):
        logger.debug("normalize_ruc: non-string input (type=%s)", type(raw).__name__)
        raise RucFormatError(RucError(ErrorKind.INVALID_FORMAT, "The number must be a string."))

    try:
        _check_clean(raw)
    except RucFormatError:
        # SAFETY: do not log raw value
        logger.debug("normalize_ruc: uncleanable input (length=%d)", len(raw))
        raise

    kept = "".join(char for char in raw if not _is_removable(char))
    folded = unicodedata.normalize("NFKC", kept)
    # NFKC can expose new separators (e.g. compatibility spaces), drop them too.
    return "".join(char for char in folded if not _is_removable(char))
