"""Unit tests for credit score calculator"""

import math
import pytest
from nbfc_console.domain.models import BorrowerFinancials, ScoreBand
from nbfc_console.domain.scoring import (
    calculate_credit_score,
    debt_to_income_ratio,
    determine_score_band,
    recommendation_for,
    score_factors,
)


def test_mid_profile_scores_good():
    """High income but heavy debt: DTI 2.0 earns nothing"""
    financials = BorrowerFinancials(
        monthly_income=50000,
        monthly_expenses=30000,
        existing_debt=100000,
        business_age_years=3,
        prior_credit_score=650,
    )

    result = calculate_credit_score(financials)

    assert debt_to_income_ratio(financials) == 2.0
    assert result.breakdown == {
        "income": 150,
        "debt_to_income": 0,
        "cash_flow": 100,
        "business_age": 70,
        "prior_credit_score": 70,
    }
    assert result.score == 690
    assert result.band == ScoreBand.GOOD


def test_empty_input_scores_minimum():
    """All zeros: no income means DTI is infinite, every factor earns 0"""
    financials = BorrowerFinancials()

    result = calculate_credit_score(financials)

    assert math.isinf(debt_to_income_ratio(financials))
    assert sum(result.breakdown.values()) == 0
    assert result.score == 300
    assert result.band == ScoreBand.POOR


def test_strong_profile_is_capped_at_850(strong_borrower: BorrowerFinancials):
    """Raw 900 clamps to the top of the published range"""
    result = calculate_credit_score(strong_borrower)

    assert sum(result.breakdown.values()) == 600
    assert result.score == 850
    assert result.band == ScoreBand.EXCELLENT


def test_zero_income_with_debt_gets_no_dti_points():
    financials = BorrowerFinancials(existing_debt=5000, prior_credit_score=800)
    assert score_factors(financials)["debt_to_income"] == 0
    assert calculate_credit_score(financials).score == 400


@pytest.mark.parametrize(
    "debt, expected_points",
    [
        (0, 150),
        (2999, 150),
        (3000, 100),  # 0.3 is not < 0.3
        (4999, 100),
        (5000, 50),
        (6999, 50),
        (7000, 0),
        (50000, 0),
    ],
)
def test_debt_to_income_ladder(debt, expected_points):
    financials = BorrowerFinancials(monthly_income=10000, existing_debt=debt)
    assert score_factors(financials)["debt_to_income"] == expected_points


@pytest.mark.parametrize(
    "income, expected_points",
    [(19999, 0), (20000, 50), (29999, 50), (30000, 100), (49999, 100), (50000, 150), (500000, 150)],
)
def test_income_ladder(income, expected_points):
    assert score_factors(BorrowerFinancials(monthly_income=income))["income"] == expected_points


@pytest.mark.parametrize(
    "expenses, expected_points",
    [(26000, 0), (25001, 0), (25000, 40), (20000, 70), (10001, 70), (10000, 100), (0, 100)],
)
def test_cash_flow_ladder(expenses, expected_points):
    """Cash flow = 30000 income - expenses"""
    financials = BorrowerFinancials(monthly_income=30000, monthly_expenses=expenses)
    assert score_factors(financials)["cash_flow"] == expected_points


@pytest.mark.parametrize("years, expected_points", [(0, 0), (1, 40), (2, 70), (4, 70), (5, 100), (30, 100)])
def test_business_age_ladder(years, expected_points):
    assert score_factors(BorrowerFinancials(business_age_years=years))["business_age"] == expected_points


@pytest.mark.parametrize(
    "prior, expected_points",
    [(0, 0), (579, 0), (580, 40), (649, 40), (650, 70), (719, 70), (720, 100), (900, 100)],
)
def test_prior_score_ladder(prior, expected_points):
    assert score_factors(BorrowerFinancials(prior_credit_score=prior))["prior_credit_score"] == expected_points


def _scores(profiles):
    return [calculate_credit_score(p).score for p in profiles]


def test_score_never_decreases_with_income():
    incomes = [0, 1, 5000, 19999, 20000, 29999, 30000, 49999, 50000, 100000]
    scores = _scores(
        BorrowerFinancials(monthly_income=i, monthly_expenses=5000, existing_debt=10000) for i in incomes
    )
    assert scores == sorted(scores)


def test_score_never_decreases_with_cash_flow():
    expenses = [60000, 40000, 30000, 25000, 20000, 10000, 0]  # falling expenses, rising cash flow
    scores = _scores(BorrowerFinancials(monthly_income=30000, monthly_expenses=e) for e in expenses)
    assert scores == sorted(scores)


def test_score_never_decreases_with_business_age_and_prior_score():
    ages = _scores(BorrowerFinancials(business_age_years=a) for a in range(0, 8))
    priors = _scores(BorrowerFinancials(prior_credit_score=p) for p in range(0, 901, 10))
    assert ages == sorted(ages)
    assert priors == sorted(priors)


def test_score_always_within_range(strong_borrower: BorrowerFinancials):
    profiles = [
        BorrowerFinancials(),
        strong_borrower,
        BorrowerFinancials(monthly_income=-5000, monthly_expenses=-90000, existing_debt=-1),
        BorrowerFinancials(monthly_income=10**9, business_age_years=10**6, prior_credit_score=10**6),
    ]
    for profile in profiles:
        result = calculate_credit_score(profile)
        assert 300 <= result.score <= 850
        assert result.band == determine_score_band(result.score)


def test_negative_inputs_are_not_rejected():
    """Negative income yields a negative DTI, which lands in the best DTI bucket"""
    financials = BorrowerFinancials(monthly_income=-1000)
    result = calculate_credit_score(financials)
    assert result.breakdown["debt_to_income"] == 150
    assert result.score == 450


def test_calculation_is_idempotent(strong_borrower: BorrowerFinancials):
    assert calculate_credit_score(strong_borrower) == calculate_credit_score(strong_borrower)


@pytest.mark.parametrize(
    "score, band",
    [
        (300, ScoreBand.POOR),
        (499, ScoreBand.POOR),
        (500, ScoreBand.FAIR),
        (649, ScoreBand.FAIR),
        (650, ScoreBand.GOOD),
        (749, ScoreBand.GOOD),
        (750, ScoreBand.EXCELLENT),
        (850, ScoreBand.EXCELLENT),
    ],
)
def test_determine_score_band(score, band):
    assert determine_score_band(score) == band


def test_every_band_has_a_recommendation():
    assert recommendation_for(ScoreBand.EXCELLENT).startswith("Excellent credit profile")
    assert recommendation_for(ScoreBand.POOR) == "Poor credit. High risk - consider rejection or secured loan."
    assert len({recommendation_for(b) for b in ScoreBand}) == 4


def test_from_raw_coerces_form_input():
    financials = BorrowerFinancials.from_raw(
        monthly_income="50000",
        monthly_expenses="30000.75",
        existing_debt="abc",
        business_age_years=None,
        prior_credit_score=float("nan"),
    )

    assert financials == BorrowerFinancials(monthly_income=50000, monthly_expenses=30000)
    # 150 income + 150 DTI (no debt) + 100 cash flow
    assert calculate_credit_score(financials).score == 700
