from dataclasses import dataclass
from enum import Enum
from typing import Union

from estimator.errors import InvalidCategoryError


class DebtCategory(str, Enum):
    CAR_LOAN = "Car Loan"
    PERSONAL_LOAN = "Personal Loan"
    CREDIT_CARD = "Credit Card"
    STUDENT_LOAN = "Student Loan"
    MEDICAL_DEBT = "Medical Debt"
    OTHER_DEBT = "Other Debt"

    @classmethod
    def default(cls) -> "DebtCategory":
        return next(iter(cls))

    @classmethod
    def labels(cls):
        return [c.value for c in cls]

    @classmethod
    def parse(cls, value: Union["DebtCategory", str]) -> "DebtCategory":
        """Accept a member or its display label ("Car Loan")."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError(f"Unknown debt category: {value!r}") from None


class AffordabilityTier(str, Enum):
    PENDING_INPUT = "Pending Input"
    DEBT_FREE = "Debt-free"
    MODERATE_DEBT = "Moderate Debt"
    HIGH_DEBT = "High Debt"


@dataclass
class DebtEntry:
    id: str
    category: DebtCategory = DebtCategory.CAR_LOAN
    amount_text: str = ""   # raw input; parsed only when calculating


@dataclass(frozen=True)
class AffordabilityResult:
    debt_to_income_ratio: float   # percent, not a fraction
    max_house_price: float
    monthly_installment: float
    affordability_tier: AffordabilityTier


PENDING_RESULT = AffordabilityResult(
    debt_to_income_ratio=0.0,
    max_house_price=0.0,
    monthly_installment=0.0,
    affordability_tier=AffordabilityTier.PENDING_INPUT,
)
