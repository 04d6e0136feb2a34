"""POST /v1/credit-score - underwriting score calculator endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from nbfc_console.api.v1.schemas import CreditScoreRequest, CreditScoreResponse
from nbfc_console.api.dependencies import get_request_id, require_permission
from nbfc_console.domain.models import BorrowerFinancials
from nbfc_console.domain.scoring import calculate_credit_score, recommendation_for
from nbfc_console.infrastructure.observability.metrics import record_credit_score
from nbfc_console.infrastructure.observability.logging import log_credit_score

router = APIRouter()


@router.post(
    "/credit-score",
    response_model=CreditScoreResponse,
    dependencies=[Depends(require_permission("underwriting"))],
)
def create_credit_score(request_body: CreditScoreRequest, request: Request):
    """
    Score a borrower from the calculator form.

    Missing or unparsable fields count as 0, so the endpoint always
    answers with a score in [300, 850].
    """
    start_time = time.time()

    financials = BorrowerFinancials.from_raw(
        monthly_income=request_body.monthly_income,
        monthly_expenses=request_body.monthly_expenses,
        existing_debt=request_body.existing_debt,
        business_age_years=request_body.business_age_years,
        prior_credit_score=request_body.prior_credit_score,
    )
    result = calculate_credit_score(financials)

    duration_ms = (time.time() - start_time) * 1000
    record_credit_score(result.score, result.band.value)
    log_credit_score(get_request_id(request), result.score, result.band.value, duration_ms)

    return CreditScoreResponse(
        score=result.score,
        band=result.band.value,
        recommendation=recommendation_for(result.band),
        breakdown=result.breakdown,
    )
