"""Affordability maths: debt-to-income ratio, tiering and the annuity installment.

Pure functions, no I/O. Every text input is accepted; anything that does not
parse degrades to a zero contribution or to the pending result.
"""
import math
import re
from typing import Any, Iterable, Optional, Tuple

from estimator.models import (
    PENDING_RESULT,
    AffordabilityResult,
    AffordabilityTier,
    DebtEntry,
)

# Fixed lending assumptions (not user-configurable)
LOAN_TO_VALUE = 0.90   # 10% deposit
ANNUAL_INTEREST_RATE = 0.04
LOAN_TERM_YEARS = 30
MODERATE_DTI_LIMIT = 20.0   # percent, inclusive

DEBT_FREE_FACTOR = 5
MODERATE_DEBT_FACTOR = 4
HIGH_DEBT_FACTOR = 3

_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def parse_amount(text: Any) -> Optional[float]:
    """Parse the leading number of `text`, like a browser's parseFloat.

    "1200" -> 1200.0, " 12.5abc" -> 12.5, "abc" / "" / None -> None.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return float(text)
    m = _NUMBER_PREFIX.match(str(text).lstrip())
    if not m:
        return None
    return float(m.group(0))


def _is_blank(value: Optional[float]) -> bool:
    # parseFloat(x) || 0 treats NaN and zero alike
    return value is None or math.isnan(value) or value == 0


def total_debt(entries: Iterable[DebtEntry]) -> float:
    """Sum of the monthly amounts; unparsable text counts as 0. Negatives are kept."""
    total = 0.0
    for entry in entries:
        amount = parse_amount(entry.amount_text)
        if not _is_blank(amount):
            total += amount
    return total


def annuity_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Monthly payment for loan 'principal' at 'monthly_rate' over 'months'."""
    if monthly_rate == 0:
        return principal / months
    f = (1 + monthly_rate) ** months
    return principal * monthly_rate * f / (f - 1)


def tier_for_ratio(ratio: float) -> Tuple[int, AffordabilityTier]:
    """Price multiple of annual salary and tier label for a DTI percentage.

    A negative ratio (negative debt amounts) keeps the debt-free multiple but
    is labelled Moderate Debt; both chains are evaluated independently.
    """
    factor = DEBT_FREE_FACTOR
    if ratio > MODERATE_DTI_LIMIT:
        factor = HIGH_DEBT_FACTOR
    elif ratio > 0:
        factor = MODERATE_DEBT_FACTOR

    if ratio == 0:
        tier = AffordabilityTier.DEBT_FREE
    elif ratio <= MODERATE_DTI_LIMIT:
        tier = AffordabilityTier.MODERATE_DEBT
    else:
        tier = AffordabilityTier.HIGH_DEBT
    return factor, tier


def compute(salary_text: Any, entries: Iterable[DebtEntry]) -> AffordabilityResult:
    salary = parse_amount(salary_text)
    if _is_blank(salary) or salary <= 0:
        return PENDING_RESULT

    debt = total_debt(entries)
    dti = 0.0 if _is_blank(debt) else (debt / salary) * 100
    factor, tier = tier_for_ratio(dti)

    annual_salary = salary * 12
    max_house_price = annual_salary * factor
    loan_amount = max_house_price * LOAN_TO_VALUE

    monthly_rate = ANNUAL_INTEREST_RATE / 12
    months = LOAN_TERM_YEARS * 12
    installment = annuity_payment(loan_amount, monthly_rate, months)

    return AffordabilityResult(
        debt_to_income_ratio=dti,
        max_house_price=max_house_price,
        monthly_installment=installment,
        affordability_tier=tier,
    )


class AffordabilityEngine:
    """Stateless wrapper so the ledger can be handed an engine instance."""

    def compute(self, salary_text: Any, entries: Iterable[DebtEntry]) -> AffordabilityResult:
        return compute(salary_text, entries)

    def total_debt(self, entries: Iterable[DebtEntry]) -> float:
        return total_debt(entries)
