"""
Factorial endpoint.

Serves the landing page when no valid input number is given, a refusal for inputs
above the configured limit, and otherwise the computed factorial with an
``X-Cache-Status`` header.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from ...constants import CACHE_STATUS_HEADER
from ...domain.factorial.validation import InputValidator, parse_input_number
from ...domain.factorial.value_objects import NoInput, Rejected
from ...services.factorial.factorial_cache_service import FactorialCacheService
from ..dependencies import factorial_service_provider, input_validator_provider
from ..templates import render_index, render_number

logger = structlog.get_logger()
router = APIRouter(tags=["factorial"])


@router.get("/", response_class=HTMLResponse)
async def index(
    input_number: Optional[str] = Query(
        None, description="Number to compute the factorial of"
    ),
    validator: InputValidator = Depends(input_validator_provider),
    service: FactorialCacheService = Depends(factorial_service_provider),
) -> Response:
    # A malformed value renders the landing page, like a missing one
    outcome = validator.validate(parse_input_number(input_number))

    if isinstance(outcome, NoInput):
        return HTMLResponse(render_index())

    # Checked before any cache access so oversized inputs never reach the store
    if isinstance(outcome, Rejected):
        return PlainTextResponse(outcome.reason)

    result = await service.compute(outcome.input_number)

    logger.info(
        "Factorial served",
        input_number=outcome.input_number,
        cache_status=result.cache_status.value,
        digits=len(result.value),
    )
    return HTMLResponse(
        render_number(outcome.input_number, result.value),
        headers={CACHE_STATUS_HEADER: result.cache_status.value},
    )
