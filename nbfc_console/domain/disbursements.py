"""Disbursement retry simulation - state transitions for failed payouts"""

import random
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable, Optional
from nbfc_console.domain.models import Disbursement, DisbursementStatus, DisbursementSummary
from nbfc_console.domain.exceptions import DisbursementStateError

MAX_RETRIES = 3
BANK_TIMEOUT_REASON = "Bank server timeout"


def start_retry(disbursement: Disbursement, max_retries: int = MAX_RETRIES) -> Disbursement:
    """
    Move a failed disbursement back into processing.

    Raises:
        DisbursementStateError: If not failed, or the retry cap is reached
    """
    if disbursement.status != DisbursementStatus.FAILED:
        raise DisbursementStateError(
            f"Disbursement {disbursement.id} is {disbursement.status.value}, only failed payouts can be retried"
        )
    if disbursement.retry_count >= max_retries:
        raise DisbursementStateError(
            f"Disbursement {disbursement.id} reached the retry limit ({max_retries})"
        )

    return replace(
        disbursement,
        status=DisbursementStatus.PROCESSING,
        retry_count=disbursement.retry_count + 1,
    )


def settle_disbursement(disbursement: Disbursement, succeeded: bool, now: datetime) -> Disbursement:
    """
    Record the bank's outcome for a processing disbursement.

    Success pays out the full approved amount and stamps a UTR
    (UTR + epoch millis). Failure pays nothing and records a timeout reason.
    """
    if disbursement.status != DisbursementStatus.PROCESSING:
        raise DisbursementStateError(
            f"Disbursement {disbursement.id} is {disbursement.status.value}, expected processing"
        )

    if succeeded:
        return replace(
            disbursement,
            status=DisbursementStatus.SUCCESS,
            disbursed_amount=disbursement.approved_amount,
            utr_number=f"UTR{int(now.timestamp() * 1000)}",
            disbursement_date=now,
            failure_reason=None,
        )

    return replace(
        disbursement,
        status=DisbursementStatus.FAILED,
        disbursed_amount=0,
        utr_number=None,
        disbursement_date=None,
        failure_reason=BANK_TIMEOUT_REASON,
    )


class DisbursementSimulator:
    """Mock bank rail: retries resolve to success with a fixed probability"""

    def __init__(
        self,
        success_rate: float = 0.7,
        rng: Optional[random.Random] = None,
        max_retries: int = MAX_RETRIES,
    ):
        if not 0.0 <= success_rate <= 1.0:
            raise ValueError(f"success_rate must be within [0, 1], got {success_rate}")
        self.success_rate = success_rate
        self.rng = rng or random.Random()
        self.max_retries = max_retries

    def retry(self, disbursement: Disbursement, now: Optional[datetime] = None) -> Disbursement:
        processing = start_retry(disbursement, self.max_retries)
        succeeded = self.rng.random() < self.success_rate
        return settle_disbursement(processing, succeeded, now or datetime.now(timezone.utc))


def summarize_disbursements(disbursements: Iterable[Disbursement]) -> DisbursementSummary:
    """Totals: paid out (success), awaiting payout (pending + processing), failed count"""
    total_disbursed = 0
    total_pending = 0
    failed_count = 0

    for d in disbursements:
        if d.status == DisbursementStatus.SUCCESS:
            total_disbursed += d.disbursed_amount
        elif d.status in (DisbursementStatus.PENDING, DisbursementStatus.PROCESSING):
            total_pending += d.approved_amount
        elif d.status == DisbursementStatus.FAILED:
            failed_count += 1

    return DisbursementSummary(
        total_disbursed=total_disbursed,
        total_pending=total_pending,
        failed_count=failed_count,
    )
