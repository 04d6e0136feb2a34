"""Disbursement listing, summary and retry endpoints"""

import logging
from dataclasses import asdict
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from nbfc_console.api.v1.schemas import (
    DisbursementListResponse,
    DisbursementSchema,
    DisbursementSummaryResponse,
)
from nbfc_console.api.dependencies import get_disbursement_simulator, get_request_id, require_permission
from nbfc_console.infrastructure.database.session import get_db
from nbfc_console.infrastructure.database.repositories import DisbursementRepository
from nbfc_console.domain.disbursements import DisbursementSimulator, summarize_disbursements
from nbfc_console.domain.exceptions import DisbursementNotFoundError, DisbursementStateError
from nbfc_console.domain.models import Disbursement, DisbursementStatus
from nbfc_console.infrastructure.observability.metrics import record_disbursement_retry
from nbfc_console.infrastructure.observability.logging import log_disbursement_retry

router = APIRouter(dependencies=[Depends(require_permission("disbursement"))])


def _to_schema(disbursement: Disbursement) -> DisbursementSchema:
    data = asdict(disbursement)
    data["status"] = disbursement.status.value
    return DisbursementSchema(**data)


@router.get("/disbursements", response_model=DisbursementListResponse)
def list_disbursements(
    status: Optional[DisbursementStatus] = Query(None, description="Filter by status"),
    db: Session = Depends(get_db),
):
    disbursements = DisbursementRepository(db).list_disbursements(status)
    return DisbursementListResponse(disbursements=[_to_schema(d) for d in disbursements])


@router.get("/disbursements/summary", response_model=DisbursementSummaryResponse)
def get_disbursement_summary(db: Session = Depends(get_db)):
    """Totals for the disbursement overview cards"""
    summary = summarize_disbursements(DisbursementRepository(db).list_disbursements())
    return DisbursementSummaryResponse(**asdict(summary))


@router.post("/disbursements/{disbursement_id}/retry", response_model=DisbursementSchema)
def retry_disbursement(
    disbursement_id: str,
    request: Request,
    db: Session = Depends(get_db),
    simulator: DisbursementSimulator = Depends(get_disbursement_simulator),
):
    """
    Re-submit a failed payout to the bank rail.

    Flow:
    1. Load the disbursement
    2. Move it to processing and let the simulator settle it
    3. Persist the settled state and return it
    """
    request_id = get_request_id(request)
    repo = DisbursementRepository(db)

    try:
        disbursement = repo.get_disbursement(disbursement_id)
        settled = simulator.retry(disbursement)
        repo.update_disbursement(settled)
        db.commit()

    except DisbursementNotFoundError as e:
        db.rollback()
        logging.warning(f"Disbursement not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="Disbursement not found")

    except DisbursementStateError as e:
        db.rollback()
        logging.warning(f"Retry rejected: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=409, detail=str(e))

    record_disbursement_retry(settled.status.value)
    log_disbursement_retry(request_id, settled.id, settled.status.value, settled.retry_count)

    return _to_schema(settled)
