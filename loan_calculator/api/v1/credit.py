"""POST /calculator/calc - full credit calculation"""

import time
import logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_calculator.api.v1.schemas import CreditSchema, ErrorResponse, ScoringDataSchema
from loan_calculator.api.dependencies import get_rate_config, get_request_id
from loan_calculator.domain.credit import calculate_credit
from loan_calculator.domain.exceptions import ComputationError, RefusalError
from loan_calculator.domain.models import RateConfig
from loan_calculator.infrastructure.observability.logging import log_credit_decision
from loan_calculator.infrastructure.observability.metrics import record_credit_decision, record_credit_error

router = APIRouter()


@router.post(
    "/calc",
    response_model=CreditSchema,
    responses={400: {"model": ErrorResponse}},
    summary="Calculate credit",
)
def calculate_credit_terms(
    request_body: ScoringDataSchema,
    request: Request,
    config: RateConfig = Depends(get_rate_config),
):
    """
    Calculate credit details from scoring data.

    Flow:
    1. Run refusal rules (first failing rule is returned as 400)
    2. Compute rate, financed amount, monthly payment and PSK
    3. Build the amortization schedule
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        credit = calculate_credit(request_body.to_domain(), config)

    except RefusalError as e:
        duration_ms = (time.time() - start_time) * 1000
        record_credit_decision(False, refusal_code=e.code)
        log_credit_decision(request_id, False, None, e.code, duration_ms)
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(message=e.reason, code=e.code).model_dump(),
        )

    except ComputationError as e:
        record_credit_error()
        logging.warning(f"Credit computation failed: {e}", extra={"request_id": request_id})
        return JSONResponse(status_code=400, content=ErrorResponse(message=str(e)).model_dump())

    except Exception as e:
        record_credit_error()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(status_code=500, content=ErrorResponse(message="Internal server error").model_dump())

    duration_ms = (time.time() - start_time) * 1000
    record_credit_decision(True, rate=credit.rate)
    log_credit_decision(request_id, True, credit.rate, None, duration_ms)

    return CreditSchema.from_domain(credit)
