"""Sample disbursements shown on a fresh console"""

from datetime import datetime, timezone
from typing import List
from sqlalchemy.orm import Session
from nbfc_console.domain.models import Disbursement, DisbursementStatus
from nbfc_console.infrastructure.database.repositories import DisbursementRepository

SAMPLE_DISBURSEMENTS: List[Disbursement] = [
    Disbursement(
        id="DISB001",
        loan_id="LN001",
        applicant_name="Rajesh Kumar",
        amount=25000,
        approved_amount=25000,
        disbursed_amount=25000,
        bank_name="HDFC Bank",
        account_number="****1234",
        ifsc_code="HDFC0001234",
        method="NEFT",
        processing_fee=750,
        gst=135,
        net_disbursement=24115,
        status=DisbursementStatus.SUCCESS,
        utr_number="HD240115001234",
        disbursement_date=datetime(2024, 1, 15, 14, 30, tzinfo=timezone.utc),
    ),
    Disbursement(
        id="DISB002",
        loan_id="LN002",
        applicant_name="Priya Sharma",
        amount=35000,
        approved_amount=35000,
        disbursed_amount=0,
        bank_name="SBI",
        account_number="****5678",
        ifsc_code="SBIN0005678",
        method="IMPS",
        processing_fee=1050,
        gst=189,
        net_disbursement=33761,
        status=DisbursementStatus.FAILED,
        retry_count=2,
        failure_reason="Invalid account number",
    ),
    Disbursement(
        id="DISB003",
        loan_id="LN003",
        applicant_name="Mohammed Ali",
        amount=15000,
        approved_amount=12000,
        disbursed_amount=0,
        bank_name="Axis Bank",
        account_number="****9012",
        ifsc_code="UTIB0009012",
        method="NEFT",
        processing_fee=360,
        gst=65,
        net_disbursement=11575,
        status=DisbursementStatus.PENDING,
    ),
    Disbursement(
        id="DISB004",
        loan_id="LN004",
        applicant_name="Sunita Devi",
        amount=40000,
        approved_amount=40000,
        disbursed_amount=40000,
        bank_name="ICICI Bank",
        account_number="****3456",
        ifsc_code="ICIC0003456",
        method="RTGS",
        processing_fee=1200,
        gst=216,
        net_disbursement=38584,
        status=DisbursementStatus.SUCCESS,
        utr_number="IC240118002345",
        disbursement_date=datetime(2024, 1, 18, 16, 45, tzinfo=timezone.utc),
    ),
]


def seed_sample_disbursements(db: Session) -> int:
    """Insert the sample rows into an empty table. Returns rows inserted."""
    repo = DisbursementRepository(db)
    if repo.count() > 0:
        return 0

    for disbursement in SAMPLE_DISBURSEMENTS:
        repo.add_disbursement(disbursement)
    db.commit()
    return len(SAMPLE_DISBURSEMENTS)
