"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

# Form fields arrive as typed text; anything unparsable scores as 0
FormNumber = Optional[Union[int, float, str]]


class CreditScoreRequest(BaseModel):
    """Request body for POST /v1/credit-score"""

    monthly_income: FormNumber = Field(None, description="Monthly income (INR)")
    monthly_expenses: FormNumber = Field(None, description="Monthly expenses (INR)")
    existing_debt: FormNumber = Field(None, description="Existing debt (INR)")
    business_age_years: FormNumber = Field(None, description="Business age in years")
    prior_credit_score: FormNumber = Field(None, description="Existing bureau score, 0 if unknown")


class CreditScoreResponse(BaseModel):
    """Response for POST /v1/credit-score"""

    score: int
    band: str
    recommendation: str
    breakdown: Dict[str, int]


class RolePermissions(BaseModel):
    role: str
    permissions: List[str]


class RolesResponse(BaseModel):
    """Response for GET /v1/roles"""

    roles: List[RolePermissions]


class AccessCheckResponse(BaseModel):
    """Response for GET /v1/access/check"""

    role: str
    permission: str
    granted: bool


class NavigationItemSchema(BaseModel):
    id: str
    title: str


class NavigationResponse(BaseModel):
    """Response for GET /v1/navigation"""

    role: Optional[str] = None
    modules: List[NavigationItemSchema]


class DisbursementSchema(BaseModel):
    """Single disbursement row"""

    id: str
    loan_id: str
    applicant_name: str
    amount: int
    approved_amount: int
    disbursed_amount: int
    bank_name: str
    account_number: str
    ifsc_code: str
    method: str
    processing_fee: int
    gst: int
    net_disbursement: int
    status: str
    retry_count: int
    utr_number: Optional[str] = None
    disbursement_date: Optional[datetime] = None
    failure_reason: Optional[str] = None


class DisbursementListResponse(BaseModel):
    """Response for GET /v1/disbursements"""

    disbursements: List[DisbursementSchema]


class DisbursementSummaryResponse(BaseModel):
    """Response for GET /v1/disbursements/summary"""

    total_disbursed: int
    total_pending: int
    failed_count: int
