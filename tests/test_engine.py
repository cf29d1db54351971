import math

import pytest

from estimator.engine import (
    AffordabilityEngine,
    annuity_payment,
    compute,
    parse_amount,
    tier_for_ratio,
    total_debt,
)
from estimator.models import PENDING_RESULT, AffordabilityTier, DebtEntry


def debts(*amounts):
    return [DebtEntry(id=str(i), amount_text=a) for i, a in enumerate(amounts)]


def expected_installment(loan):
    r = 0.04 / 12
    f = (1 + r) ** 360
    return loan * r * f / (f - 1)


@pytest.mark.parametrize("salary", ["", "0", "-5", "abc", None, "  "])
def test_no_valid_salary_gives_pending(salary):
    assert compute(salary, []) == PENDING_RESULT
    assert compute(salary, debts("500")) == PENDING_RESULT


def test_debt_free():
    out = compute("5000", [])
    assert out.debt_to_income_ratio == 0
    assert out.affordability_tier is AffordabilityTier.DEBT_FREE
    assert out.max_house_price == 300000
    assert out.monthly_installment == pytest.approx(expected_installment(270000))
    assert out.monthly_installment == pytest.approx(1289.02, abs=0.01)


def test_moderate_debt():
    out = compute("5000", debts("300", "200"))
    assert out.debt_to_income_ratio == pytest.approx(10)
    assert out.affordability_tier is AffordabilityTier.MODERATE_DEBT
    assert out.max_house_price == 240000
    assert out.monthly_installment == pytest.approx(expected_installment(216000))


def test_high_debt():
    out = compute("5000", debts("1200"))
    assert out.debt_to_income_ratio == pytest.approx(24)
    assert out.affordability_tier is AffordabilityTier.HIGH_DEBT
    assert out.max_house_price == 180000


def test_exactly_twenty_percent_stays_moderate():
    out = compute("5000", debts("1000"))
    assert out.debt_to_income_ratio == 20
    assert out.affordability_tier is AffordabilityTier.MODERATE_DEBT
    assert out.max_house_price == 240000


def test_unparsable_amounts_count_as_zero():
    out = compute("5000", debts("", "abc", "500"))
    assert out.debt_to_income_ratio == pytest.approx(10)
    assert compute("5000", debts("", "abc")).affordability_tier is AffordabilityTier.DEBT_FREE


def test_negative_amounts_are_not_clamped():
    # Known edge case: a negative total keeps the debt-free multiple but the
    # label falls through to Moderate Debt.
    assert total_debt(debts("500", "-200")) == 300
    out = compute("5000", debts("-500"))
    assert out.debt_to_income_ratio == pytest.approx(-10)
    assert out.max_house_price == 300000
    assert out.affordability_tier is AffordabilityTier.MODERATE_DEBT


def test_debts_cancelling_to_zero_are_debt_free():
    out = compute("5000", debts("500", "-500"))
    assert out.debt_to_income_ratio == 0
    assert out.affordability_tier is AffordabilityTier.DEBT_FREE


def test_compute_is_idempotent():
    entries = debts("123.45", "67.8")
    assert compute("4321.5", entries) == compute("4321.5", entries)


def test_infinite_salary_does_not_raise():
    out = compute("Infinity", debts("100"))
    assert out.debt_to_income_ratio == 0
    assert math.isinf(out.max_house_price)


@pytest.mark.parametrize("text,expected", [
    ("1200", 1200.0),
    ("  12.5", 12.5),
    ("12abc", 12.0),
    ("-3", -3.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("1e", 1.0),
    ("+7", 7.0),
    (42, 42.0),
])
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", ".", "-", None, "RM100", "١٢٠٠", "５０００"])
def test_parse_amount_rejects(text):
    assert parse_amount(text) is None


def test_tier_for_ratio():
    assert tier_for_ratio(0) == (5, AffordabilityTier.DEBT_FREE)
    assert tier_for_ratio(0.01) == (4, AffordabilityTier.MODERATE_DEBT)
    assert tier_for_ratio(20) == (4, AffordabilityTier.MODERATE_DEBT)
    assert tier_for_ratio(20.0001) == (3, AffordabilityTier.HIGH_DEBT)


def test_annuity_payment():
    assert annuity_payment(270000, 0.04 / 12, 360) == pytest.approx(expected_installment(270000))
    assert annuity_payment(1200, 0, 12) == 100


def test_engine_class_delegates():
    engine = AffordabilityEngine()
    entries = debts("1000")
    assert engine.compute("5000", entries) == compute("5000", entries)
    assert engine.total_debt(entries) == 1000


def test_non_ascii_digits_are_not_numbers():
    assert total_debt(debts("١٢٠٠", "500")) == 500
    assert compute("５０００", []) == PENDING_RESULT
