import math

from estimator.models import AffordabilityResult

def fmt_money(x, symbol="RM"):
    """en-MY currency style: RM1,288.19, RM300,000, -RM500 (0-2 decimals).

    Negative values keep their sign even when they round to zero (-RM0).
    """
    try:
        value = float(x)
        if not math.isfinite(value):
            return "-"
        sign = "-" if math.copysign(1.0, value) < 0 else ""
        body = f"{abs(value):,.2f}".rstrip("0").rstrip(".")
        return f"{sign}{symbol}{body}"
    except Exception:
        return "-"

def fmt_ratio(result: AffordabilityResult):
    return f"{result.debt_to_income_ratio:.1f}% ({result.affordability_tier.value})"
