import streamlit as st

from estimator.engine import (
    ANNUAL_INTEREST_RATE,
    DEBT_FREE_FACTOR,
    HIGH_DEBT_FACTOR,
    LOAN_TERM_YEARS,
    LOAN_TO_VALUE,
    MODERATE_DEBT_FACTOR,
    MODERATE_DTI_LIMIT,
)

st.set_page_config(page_title="Methodology • Housing Affordability Estimator", layout="wide")
st.title("🧩 Methodology")
st.caption("How your salary and debts turn into a price range and a monthly installment")

st.markdown(f"""
## Architecture Overview
The page is a thin Streamlit layer over two pieces:

1. **Debt ledger** (`estimator/ledger.py`)
   - Holds your salary and the debt rows, in the order you added them.
   - Every edit (salary, add/remove row, change type or amount) triggers a full recalculation.

2. **Affordability engine** (`estimator/engine.py`)
   - Pure maths, no storage. Empty or non-numeric amounts count as zero.
   - Without a positive salary the results stay at **Pending Input**.

## Assumptions (fixed)
| Item | Value |
|---|---|
| Deposit | {1 - LOAN_TO_VALUE:.0%} of the house price |
| Interest rate | {ANNUAL_INTEREST_RATE:.0%} p.a., compounded monthly |
| Tenure | {LOAN_TERM_YEARS} years ({LOAN_TERM_YEARS * 12} payments) |
""")

st.markdown("---")
st.markdown("## Calculation Steps")

st.markdown("**1) Debt-to-income ratio (DTI)**")
st.latex(r"\mathrm{DTI} = \frac{\text{total monthly debt}}{\text{monthly salary}} \times 100")

st.markdown(f"""
**2) Affordability tier and salary multiple**

| DTI | Tier | Max price (× annual salary) |
|---|---|---|
| 0% | Debt-free | {DEBT_FREE_FACTOR} |
| above 0% up to {MODERATE_DTI_LIMIT:.0f}% | Moderate Debt | {MODERATE_DEBT_FACTOR} |
| above {MODERATE_DTI_LIMIT:.0f}% | High Debt | {HIGH_DEBT_FACTOR} |
""")

st.markdown("**3) Monthly installment** on the financed amount (price less deposit)")
st.latex(r"M = \frac{L \cdot r \cdot (1+r)^n}{(1+r)^n - 1}, \quad r = \frac{0.04}{12},\ n = 360")

st.markdown("---")
st.header("Flow")
st.graphviz_chart("""
digraph Estimator {
  graph [rankdir=LR, fontsize=10];
  node [shape=box, style="rounded,filled", fillcolor="#eef6ff"];

  Input[label="User input\\n(salary, debt rows)", fillcolor="#e8fff2"];
  Ledger[label="DebtLedger\\n(add / update / remove)"];
  Engine[label="AffordabilityEngine\\n(DTI, tier, price, installment)"];
  UI[label="Results panel\\n(RM formatting)", fillcolor="#e8fff2"];

  Input -> Ledger -> Engine -> UI;
}
""")

st.markdown("""
---

## Validation
- Unit tests cover the tier boundaries (exactly 20% stays Moderate Debt), the annuity maths and ledger ordering.
- Negative amounts are summed as entered (no clamping); treat results with negative rows as indicative only.

## Privacy
- Nothing is stored; inputs live only in your browser session.
""")
