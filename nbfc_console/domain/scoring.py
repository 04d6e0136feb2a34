"""Credit score calculator - additive point-bucket model for underwriting"""

import math
from typing import Dict, List, Tuple
from nbfc_console.domain.models import BorrowerFinancials, CreditScoreResult, ScoreBand

BASE_SCORE = 300
MAX_SCORE = 850

# (threshold, points) ladders, highest threshold first
INCOME_LADDER: List[Tuple[float, int]] = [(50_000, 150), (30_000, 100), (20_000, 50)]
CASH_FLOW_LADDER: List[Tuple[float, int]] = [(20_000, 100), (10_000, 70), (5_000, 40)]
BUSINESS_AGE_LADDER: List[Tuple[float, int]] = [(5, 100), (2, 70), (1, 40)]
PRIOR_SCORE_LADDER: List[Tuple[float, int]] = [(720, 100), (650, 70), (580, 40)]

# Debt-to-income is "lower is better": (exclusive upper bound, points)
DEBT_TO_INCOME_LADDER: List[Tuple[float, int]] = [(0.3, 150), (0.5, 100), (0.7, 50)]

RECOMMENDATIONS: Dict[ScoreBand, str] = {
    ScoreBand.EXCELLENT: "Excellent credit profile. Approved for premium rates.",
    ScoreBand.GOOD: "Good credit profile. Consider standard rates with monitoring.",
    ScoreBand.FAIR: "Fair credit. Requires additional documentation and higher rates.",
    ScoreBand.POOR: "Poor credit. High risk - consider rejection or secured loan.",
}


def _points_at_least(value: float, ladder: List[Tuple[float, int]]) -> int:
    for threshold, points in ladder:
        if value >= threshold:
            return points
    return 0


def _points_below(value: float, ladder: List[Tuple[float, int]]) -> int:
    for bound, points in ladder:
        if value < bound:
            return points
    return 0


def debt_to_income_ratio(financials: BorrowerFinancials) -> float:
    """Existing debt over monthly income; +inf when there is no income"""
    if financials.monthly_income == 0:
        return math.inf
    return financials.existing_debt / financials.monthly_income


def score_factors(financials: BorrowerFinancials) -> Dict[str, int]:
    """
    Points awarded per factor. Factors are independent and only summed.

    Income (0-150), debt-to-income (0-150), cash flow (0-100),
    business age (0-100), prior credit score (0-100).
    """
    cash_flow = financials.monthly_income - financials.monthly_expenses

    return {
        "income": _points_at_least(financials.monthly_income, INCOME_LADDER),
        "debt_to_income": _points_below(debt_to_income_ratio(financials), DEBT_TO_INCOME_LADDER),
        "cash_flow": _points_at_least(cash_flow, CASH_FLOW_LADDER),
        "business_age": _points_at_least(financials.business_age_years, BUSINESS_AGE_LADDER),
        "prior_credit_score": _points_at_least(financials.prior_credit_score, PRIOR_SCORE_LADDER),
    }


def determine_score_band(score: int) -> ScoreBand:
    """
    Map a score to its band.

    - 750+:    Excellent
    - 650-749: Good
    - 500-649: Fair
    - below:   Poor
    """
    if score >= 750:
        return ScoreBand.EXCELLENT
    elif score >= 650:
        return ScoreBand.GOOD
    elif score >= 500:
        return ScoreBand.FAIR
    else:
        return ScoreBand.POOR


def recommendation_for(band: ScoreBand) -> str:
    return RECOMMENDATIONS[band]


def calculate_credit_score(financials: BorrowerFinancials) -> CreditScoreResult:
    """
    Main entry point: score a borrower on the 300-850 range.

    The raw sum can reach 900 (300 base + 500 factor points), so the result
    is capped at 850. Every factor contributes >= 0, so the floor is the base.
    """
    breakdown = score_factors(financials)
    score = min(MAX_SCORE, BASE_SCORE + sum(breakdown.values()))

    return CreditScoreResult(
        score=score,
        band=determine_score_band(score),
        breakdown=breakdown,
    )
