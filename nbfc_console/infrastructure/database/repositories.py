"""Data access layer for disbursements"""

from typing import List, Optional
from sqlalchemy.orm import Session
from nbfc_console.infrastructure.database.models import DisbursementRecord
from nbfc_console.domain.models import Disbursement, DisbursementStatus
from nbfc_console.domain.exceptions import DisbursementNotFoundError


def _to_domain(record: DisbursementRecord) -> Disbursement:
    return Disbursement(
        id=record.id,
        loan_id=record.loan_id,
        applicant_name=record.applicant_name,
        amount=record.amount,
        approved_amount=record.approved_amount,
        disbursed_amount=record.disbursed_amount,
        bank_name=record.bank_name,
        account_number=record.account_number,
        ifsc_code=record.ifsc_code,
        method=record.method,
        processing_fee=record.processing_fee,
        gst=record.gst,
        net_disbursement=record.net_disbursement,
        status=DisbursementStatus(record.status),
        retry_count=record.retry_count,
        utr_number=record.utr_number,
        disbursement_date=record.disbursement_date,
        failure_reason=record.failure_reason,
    )


class DisbursementRepository:
    """Repository for loan disbursements"""

    def __init__(self, db: Session):
        self.db = db

    def list_disbursements(self, status: Optional[DisbursementStatus] = None) -> List[Disbursement]:
        """Fetch disbursements ordered by ID, optionally filtered by status"""
        query = self.db.query(DisbursementRecord)
        if status is not None:
            query = query.filter(DisbursementRecord.status == status.value)
        return [_to_domain(r) for r in query.order_by(DisbursementRecord.id).all()]

    def get_disbursement(self, disbursement_id: str) -> Disbursement:
        """
        Raises:
            DisbursementNotFoundError: If no row has this ID
        """
        record = self.db.get(DisbursementRecord, disbursement_id)
        if record is None:
            raise DisbursementNotFoundError(f"Disbursement {disbursement_id} not found")
        return _to_domain(record)

    def add_disbursement(self, disbursement: Disbursement) -> None:
        self.db.add(
            DisbursementRecord(
                id=disbursement.id,
                loan_id=disbursement.loan_id,
                applicant_name=disbursement.applicant_name,
                amount=disbursement.amount,
                approved_amount=disbursement.approved_amount,
                disbursed_amount=disbursement.disbursed_amount,
                bank_name=disbursement.bank_name,
                account_number=disbursement.account_number,
                ifsc_code=disbursement.ifsc_code,
                method=disbursement.method,
                processing_fee=disbursement.processing_fee,
                gst=disbursement.gst,
                net_disbursement=disbursement.net_disbursement,
                status=disbursement.status.value,
                retry_count=disbursement.retry_count,
                utr_number=disbursement.utr_number,
                disbursement_date=disbursement.disbursement_date,
                failure_reason=disbursement.failure_reason,
            )
        )
        self.db.flush()

    def update_disbursement(self, disbursement: Disbursement) -> None:
        """Persist the mutable payout fields after a state transition"""
        record = self.db.get(DisbursementRecord, disbursement.id)
        if record is None:
            raise DisbursementNotFoundError(f"Disbursement {disbursement.id} not found")

        record.status = disbursement.status.value
        record.retry_count = disbursement.retry_count
        record.disbursed_amount = disbursement.disbursed_amount
        record.utr_number = disbursement.utr_number
        record.disbursement_date = disbursement.disbursement_date
        record.failure_reason = disbursement.failure_reason
        self.db.flush()

    def count(self) -> int:
        return self.db.query(DisbursementRecord).count()
