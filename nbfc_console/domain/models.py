"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from nbfc_console.utils.number_utils import parse_int_or_zero


class ScoreBand(str, Enum):
    """Qualitative label derived from a numeric credit score"""

    POOR = "Poor"
    FAIR = "Fair"
    GOOD = "Good"
    EXCELLENT = "Excellent"


class DisbursementStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class BorrowerFinancials:
    """User-entered inputs to the credit score calculator (amounts in rupees)"""

    monthly_income: int = 0
    monthly_expenses: int = 0
    existing_debt: int = 0
    business_age_years: int = 0
    prior_credit_score: int = 0  # 0 when unknown

    @classmethod
    def from_raw(
        cls,
        monthly_income: Any = None,
        monthly_expenses: Any = None,
        existing_debt: Any = None,
        business_age_years: Any = None,
        prior_credit_score: Any = None,
    ) -> "BorrowerFinancials":
        """Build from form input, coercing anything non-numeric or missing to 0"""
        return cls(
            monthly_income=parse_int_or_zero(monthly_income),
            monthly_expenses=parse_int_or_zero(monthly_expenses),
            existing_debt=parse_int_or_zero(existing_debt),
            business_age_years=parse_int_or_zero(business_age_years),
            prior_credit_score=parse_int_or_zero(prior_credit_score),
        )


@dataclass(frozen=True)
class CreditScoreResult:
    """Output of the credit score calculator"""

    score: int
    band: ScoreBand
    breakdown: Dict[str, int] = field(default_factory=dict)  # points awarded per factor


@dataclass(frozen=True)
class NavigationItem:
    """Single entry in the dashboard sidebar"""

    id: str
    title: str


@dataclass
class Disbursement:
    """Payout of an approved loan to the borrower's bank account"""

    id: str
    loan_id: str
    applicant_name: str
    amount: int
    approved_amount: int
    disbursed_amount: int
    bank_name: str
    account_number: str
    ifsc_code: str
    method: str  # NEFT | IMPS | RTGS
    processing_fee: int
    gst: int
    net_disbursement: int
    status: DisbursementStatus = DisbursementStatus.PENDING
    retry_count: int = 0
    utr_number: Optional[str] = None
    disbursement_date: Optional[datetime] = None
    failure_reason: Optional[str] = None


@dataclass
class DisbursementSummary:
    """Portfolio totals shown above the disbursement table"""

    total_disbursed: int
    total_pending: int
    failed_count: int
