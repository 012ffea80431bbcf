"""RUC routes.

GET    /ruc            — identifier metadata
POST   /ruc/validate   — structured validation result (always 200)
POST   /ruc/compact    — canonical digits-only form (422 on uncleanable input)
POST   /ruc/format     — display form "<front>-<check>" (422 on uncleanable input)

Raw values are never logged; responses echo only what the caller sent.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from rucpy.core.constants import RUC_METADATA
from rucpy.validation import ruc
from rucpy.validation.errors import RucFormatError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ruc", tags=["ruc"])


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------

class RucBody(BaseModel):
    value: str


class CompactResponse(BaseModel):
    compact: str


class FormatResponse(BaseModel):
    formatted: str


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get("", summary="Describe the RUC identifier")
def describe() -> dict[str, str]:
    return dict(RUC_METADATA)


@router.post("/validate", summary="Validate a RUC number")
def validate_ruc(body: RucBody):
    return ruc.validate(body.value).to_dict()


@router.post("/compact", summary="Return the canonical form of a RUC number")
def compact_ruc(body: RucBody) -> CompactResponse:
    try:
        return CompactResponse(compact=ruc.compact(body.value))
    except RucFormatError as exc:
        raise _unprocessable(exc)


@router.post("/format", summary="Return the display form of a RUC number")
def format_ruc(body: RucBody) -> FormatResponse:
    try:
        return FormatResponse(formatted=ruc.format(body.value))
    except RucFormatError as exc:
        raise _unprocessable(exc)


def _unprocessable(exc: RucFormatError) -> HTTPException:
    logger.info("RUC rejected by normalizer (kind=%s)", exc.kind.value)
    return HTTPException(status_code=422, detail=exc.error.to_dict())
