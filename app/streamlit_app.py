import pandas as pd
import streamlit as st

from estimator.engine import parse_amount
from estimator.formatting import fmt_money, fmt_ratio
from estimator.ledger import DebtLedger
from estimator.models import DebtCategory
from estimator.settings import configure_logging, load_settings

st.set_page_config(page_title="Housing Affordability Estimator", layout="wide")

@st.cache_resource
def get_settings():
    settings = load_settings()
    configure_logging(settings["log_level"])
    return settings

settings = get_settings()
money = settings["currency_symbol"]

if "ledger" not in st.session_state:
    st.session_state.ledger = DebtLedger()
ledger: DebtLedger = st.session_state.ledger


# ---------- callbacks (run before the next rerun renders) ----------

def on_salary_change():
    ledger.set_salary(st.session_state.salary)

def on_entry_change(entry_id: str, field: str, widget_key: str):
    ledger.update_entry(entry_id, field, st.session_state[widget_key])

def on_reset():
    # drop per-row widget state along with the rows
    for entry in ledger:
        for prefix in ("category_", "amount_"):
            st.session_state.pop(prefix + entry.id, None)
    ledger.clear_all()
    st.session_state.salary = ""


title_col, reset_col = st.columns([5, 1])
with title_col:
    st.title(f"🏠 {settings['title']}")
with reset_col:
    st.button("Reset", key="reset", on_click=on_reset, help="Clear all inputs")

left, right = st.columns(2)

with left:
    st.subheader("Your Details")
    st.text_input(
        f"Monthly Salary ({money})",
        key="salary",
        placeholder="Enter your monthly salary",
        on_change=on_salary_change,
    )

    head_col, add_col = st.columns([3, 1])
    with head_col:
        st.write("**Monthly Debt Payments**")
    with add_col:
        st.button("➕ Add Debt", key="add_debt", on_click=ledger.add_entry)

    categories = DebtCategory.labels()
    for entry in ledger:
        c1, c2, c3 = st.columns([3, 3, 1])
        with c1:
            cat_key = f"category_{entry.id}"
            st.selectbox(
                "Debt type",
                categories,
                key=cat_key,
                label_visibility="collapsed",
                on_change=on_entry_change,
                args=(entry.id, "category", cat_key),
            )
        with c2:
            amt_key = f"amount_{entry.id}"
            st.text_input(
                f"Amount ({money})",
                key=amt_key,
                placeholder="Amount",
                label_visibility="collapsed",
                on_change=on_entry_change,
                args=(entry.id, "amount_text", amt_key),
            )
        with c3:
            st.button("✕", key=f"remove_{entry.id}", on_click=ledger.remove_entry, args=(entry.id,))

    if len(ledger) > 0:
        st.write(f"Total Monthly Debt: **{fmt_money(ledger.total_debt(), money)}**")
        breakdown = pd.DataFrame(
            [
                {"Debt type": e.category.value, f"Monthly ({money})": parse_amount(e.amount_text) or 0.0}
                for e in ledger
            ]
        )
        breakdown = breakdown.groupby("Debt type", sort=False, as_index=False).sum()
        st.dataframe(breakdown, hide_index=True)

with right:
    st.subheader("Your Results")
    result = ledger.result
    st.metric("Debt-to-Income Ratio", fmt_ratio(result))
    st.metric("Maximum House Price", fmt_money(result.max_house_price, money))
    st.metric("Estimated Monthly Installment", fmt_money(result.monthly_installment, money))
    st.caption("Assumes a 10% deposit, 4% p.a. interest and a 30-year tenure.")

    if settings["tips"]:
        st.warning("**Important Considerations:**\n" + "\n".join(f"- {t}" for t in settings["tips"]))


st.divider()
st.caption(f"[{settings['footer_label']}]({settings['footer_url']})")
