import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from bookkeeping.analytics import FinanceAnalytics
from bookkeeping.config import get_settings
from bookkeeping.domain import CategoryType
from bookkeeping.exceptions import InsufficientFundsError
from bookkeeping.factory import FinanceFactory
from bookkeeping.frames import operations_frame, running_balance
from bookkeeping.logging_setup import configure_logging
from bookkeeping.report import build_account_report
from bookkeeping.seed import load_seed
from bookkeeping.timing import timed

settings = get_settings()
configure_logging(settings.log_level)
CUR = settings.currency

st.set_page_config(page_title="Bookkeeping", layout="wide")

if "seed" not in st.session_state:
    with timed("Adding operations") as seed_timing:
        st.session_state.seed = load_seed(settings.seed_path)
    st.session_state.seed_ms = seed_timing.elapsed_ms

account = st.session_state.seed.account
categories = st.session_state.seed.categories

menu = st.sidebar.radio(
    "Menu",
    ["🏠 Overview", "🧾 Operations", "📊 Analytics"]
)
st.sidebar.caption(f"Seed replayed in {st.session_state.seed_ms:.3f} ms")

if menu == "🏠 Overview":
    report = build_account_report(account)
    st.title(f"🏦 {report.account_name}")

    k1, k2, k3 = st.columns(3)
    with k1:
        st.metric("Balance", f"{report.balance:,} {CUR}")
    with k2:
        st.metric("Net income", f"{report.income_expense_difference:,} {CUR}")
    with k3:
        st.metric("Operations", len(account.operations))

    bal = running_balance(account)
    fig_bal = go.Figure()
    fig_bal.add_trace(go.Scatter(x=list(bal.index), y=[float(v) for v in bal], mode="lines+markers", name="Balance"))
    fig_bal.update_layout(
        template="plotly_dark",
        xaxis_title="Operation #",
        yaxis_title=f"Balance ({CUR})",
        margin=dict(t=30, b=10, l=10, r=10),
    )
    st.plotly_chart(fig_bal, use_container_width=True)

    st.subheader("Expenses by category")
    if report.grouped_expenses:
        for name, total in report.grouped_expenses.items():
            st.write(f"- {name}: {total:,} {CUR}")
    else:
        st.info("No expenses recorded yet.")

elif menu == "🧾 Operations":
    st.title("🧾 Operations")

    st.subheader("➕ Add Operation")
    with st.form("input_form", clear_on_submit=True):
        col1, col2 = st.columns(2)
        with col1:
            op_type = st.selectbox("Type", [t.value for t in CategoryType])
            amount = st.text_input("Amount", value="0")
        with col2:
            cat_key = st.selectbox("Category", list(categories.keys()), format_func=lambda k: categories[k].name)
            new_cat = st.text_input("…or new category name")
        description = st.text_input("Description (optional)")
        submitted = st.form_submit_button("Add Operation")

        if submitted:
            if new_cat:
                key = new_cat.strip().lower()
                if key not in categories:
                    categories[key] = FinanceFactory.create_category(new_cat.strip(), CategoryType(op_type))
                cat_key = key
            try:
                FinanceFactory.create_operation(
                    CategoryType(op_type), account, amount, categories[cat_key], description
                )
                st.success(f"Recorded. Balance: {account.balance:,} {CUR}")
            except InsufficientFundsError as e:
                st.error(f"Insufficient funds: balance {e.balance:,} {CUR}, expense {e.amount:,} {CUR}")
            except ArithmeticError:
                st.error(f"Not a valid amount: {amount!r}")

    st.divider()
    df = operations_frame(account)
    if not df.empty:
        disp = df[["date", "type", "category", "amount", "description"]].copy()
        disp["date"] = disp["date"].dt.strftime("%Y-%m-%d %H:%M:%S")
        disp["amount"] = disp["amount"].map(lambda x: f"{x:,} {CUR}")
        st.table(disp.reset_index(drop=True))
        st.download_button("⬇ Download CSV", df.to_csv(index=False), file_name="operations.csv")
    else:
        st.info("No operations to display.")

    if st.button("🔄 Recalculate balance from log", key="btn_recalc"):
        st.success(f"Balance: {account.recalculate_balance():,} {CUR}")

elif menu == "📊 Analytics":
    st.title("📊 Analytics")

    st.metric("Income − expenses", f"{FinanceAnalytics.get_income_expense_difference(account):,} {CUR}")

    st.subheader("Top expense categories")
    k = st.number_input("Show top-K categories:", min_value=1, max_value=20, value=5, key="top_k_analytics")
    top_cats = list(FinanceAnalytics.get_top_expense_categories(account, int(k)))
    if top_cats:
        df_top = pd.DataFrame([{"Category": n, "Amount": float(v)} for n, v in top_cats])
        fig_top = px.bar(df_top, x="Category", y="Amount", title="Top expense categories", template="plotly_dark")
        st.plotly_chart(fig_top, use_container_width=True)
        figp = px.pie(df_top, values="Amount", names="Category", title="Expense distribution")
        st.plotly_chart(figp, use_container_width=True)
    else:
        st.info("No data to analyze")
