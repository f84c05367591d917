"""POST /calculator/offers - four preliminary loan offers"""

import time
import logging
from typing import List
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from loan_calculator.api.v1.schemas import ErrorResponse, LoanOfferSchema, LoanRequestSchema
from loan_calculator.api.dependencies import get_rate_config, get_request_id
from loan_calculator.domain.exceptions import ComputationError
from loan_calculator.domain.models import RateConfig
from loan_calculator.domain.offers import generate_offers
from loan_calculator.infrastructure.observability.logging import log_offers
from loan_calculator.infrastructure.observability.metrics import record_offers

router = APIRouter()


@router.post(
    "/offers",
    response_model=List[LoanOfferSchema],
    responses={400: {"model": ErrorResponse}},
    summary="Calculate possible loan terms",
)
def calculate_loan_offers(
    request_body: LoanRequestSchema,
    request: Request,
    config: RateConfig = Depends(get_rate_config),
):
    """
    Return four preliminary offers, one per combination of insurance and
    salary-client status, sorted by rate descending.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        offers = generate_offers(request_body.to_domain(), config)

    except ComputationError as e:
        logging.warning(f"Offer computation failed: {e}", extra={"request_id": request_id})
        return JSONResponse(status_code=400, content=ErrorResponse(message=str(e)).model_dump())

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(status_code=500, content=ErrorResponse(message="Internal server error").model_dump())

    record_offers()
    log_offers(request_id, request_body.amount, request_body.term, len(offers), (time.time() - start_time) * 1000)

    return [LoanOfferSchema.from_domain(offer) for offer in offers]
