"""RUC structural constants and identifier metadata.

The Registro Único de Contribuyentes (RUC) is the unique taxpayer registry
that maintains identification numbers for all persons (national or foreign)
and legal entities in Paraguay.

Numbers for legal entities consist of 8 digits starting after 80000000.
Numbers for residents and foreigners are up to 9 digits.  The last digit
is always a check digit.

Reference: https://www.ruc.com.py/
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------

RUC_MIN_LENGTH = 5
RUC_MAX_LENGTH = 9

# Legal entities are numbered strictly above this value.
COMPANY_THRESHOLD = 80000000
COMPANY_FRONT_LENGTH = 8

# Characters removed from raw input before any other processing.
SEPARATORS = " -"

# ---------------------------------------------------------------------------
# Identifier metadata
# ---------------------------------------------------------------------------

RUC_METADATA: dict[str, str] = {
    "name": "Paraguay RUC Number",
    "local_name": "Registro Único de Contribuyentes",
    "abbreviation": "RUC",
    "country": "PY",
    "entity_scope": "BANK",
}
