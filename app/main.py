"""
Streamlit Frontend for MoneyMate

This is the single-screen interface the user interacts with daily.

DESIGN PRINCIPLES:
1. Simple, clear interface
2. Dashboard with two destinations: expenses and loans given
3. Clear error messages for rejected input
4. Tell the user when something could not be saved
5. No hidden actions

The UI never edits records itself. Every change goes through the
LoanLedger or ExpenseBook and the returned result is shown as-is.
"""

import html

import streamlit as st

from moneymate.config import get_settings, validate_all_settings
from moneymate.models import LedgerOutcome, LedgerResult, ValidationIssue
from moneymate.orchestrator import AppComponents, create_app_components


# Page configuration
st.set_page_config(
    page_title="Personal Finance Manager",
    page_icon="💰",
    layout="centered",
    initial_sidebar_state="expanded",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stApp {
        background: linear-gradient(135deg, #dbe6ff 0%, #eadcff 100%);
    }
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .dashboard-card {
        padding: 20px;
        background-color: #ffffff;
        border-radius: 10px;
        box-shadow: 0 2px 6px rgba(0, 0, 0, 0.15);
        margin: 10px 0;
    }
    .loan-card {
        padding: 16px;
        background-color: #ffffff;
        border-radius: 10px;
        border-left: 5px solid #fd7e14;
        margin: 10px 0;
    }
    .big-number {
        font-size: 1.6em;
        font-weight: bold;
        color: #2c3e50;
    }
</style>
""", unsafe_allow_html=True)


PAGES = ["🏠 Dashboard", "💵 My Expenses", "🤝 Loans Given", "⚙️ Settings"]


@st.cache_resource
def get_components() -> AppComponents:
    """Get or create application components (cached)."""
    return create_app_components()


def currency() -> str:
    return st.session_state.get("currency_symbol", "$")


def format_amount(amount) -> str:
    return f"{currency()}{amount:,.2f}"


def show_issues(issues: list[ValidationIssue]) -> None:
    """Show validation issues next to the form that produced them."""
    for issue in issues:
        text = issue.message
        if issue.suggested_fix:
            text += f" ({issue.suggested_fix})"
        st.error(text)


def warn_if_not_saved(persisted) -> None:
    if persisted is False:
        st.warning(
            "⚠️ Your change was recorded but could not be saved to disk. "
            "It will be lost when the app closes."
        )


def main():
    """Main application entry point."""
    components = get_components()

    if "currency_symbol" not in st.session_state:
        st.session_state.currency_symbol = get_settings().app.currency_symbol

    st.sidebar.title("💰 MoneyMate")
    st.sidebar.markdown("---")

    if "page" not in st.session_state:
        st.session_state.page = PAGES[0]

    page = st.sidebar.radio(
        "Navigate to:",
        PAGES,
        key="page",
    )

    if page == "🏠 Dashboard":
        render_dashboard()
    elif page == "💵 My Expenses":
        render_expenses_page(components)
    elif page == "🤝 Loans Given":
        render_loans_page(components)
    elif page == "⚙️ Settings":
        render_settings_page(components)


def go_to(page: str) -> None:
    st.session_state.page = page


def render_dashboard():
    """Render the dashboard with its two navigation cards."""
    st.title("Personal Finance Manager")

    st.markdown(
        '<div class="dashboard-card"><span class="big-number">💵 My Expenses</span></div>',
        unsafe_allow_html=True,
    )
    st.button("Open My Expenses", on_click=go_to, args=("💵 My Expenses",))

    st.markdown(
        '<div class="dashboard-card"><span class="big-number">🤝 Loans Given</span></div>',
        unsafe_allow_html=True,
    )
    st.button("Open Loans Given", on_click=go_to, args=("🤝 Loans Given",))


def render_expenses_page(components: AppComponents):
    """Render the expense list and the add-expense form."""
    book = components.expenses
    st.title("Expense Management")

    # Load once per session, when the view is first shown
    if not st.session_state.get("expenses_loaded"):
        book.load()
        st.session_state.expenses_loaded = True

    groups = book.grouped_by_day()
    if not groups:
        st.info("No expenses yet. Add your first one below.")
    for day, expenses in groups:
        st.subheader(day.strftime("%b %d, %Y"))
        for expense in expenses:
            col1, col2 = st.columns([3, 1])
            col1.write(expense.category)
            col2.write(format_amount(expense.amount))

    st.markdown("---")

    category = st.selectbox("Category", book.categories, key="expense_category")
    custom_category = ""
    if category == book.other_category:
        custom_category = st.text_input("Specify Expense Type", key="expense_custom")

    with st.form("add_expense", clear_on_submit=True):
        amount = st.text_input("Expense Amount", placeholder="0.00")
        submitted = st.form_submit_button("Add Expense", type="primary")

    if submitted:
        result = book.add_expense(amount, category, custom_category)
        if result.ok:
            warn_if_not_saved(result.persisted)
            st.rerun()
        else:
            show_issues(result.issues)


def render_loan(ledger, loan) -> None:
    """Render one loan card with its repayment history and actions."""
    st.markdown(f"""
    <div class="loan-card">
        <strong>{html.escape(loan.recipient)}</strong>
        <span style="float:right" class="big-number">{html.escape(format_amount(loan.amount))}</span>
        <p style="color:gray">Reason: {html.escape(loan.reason)}</p>
    </div>
    """, unsafe_allow_html=True)

    if loan.repayment_history:
        st.markdown("**Repayment History:**")
        for repayment in loan.repayment_history:
            col1, col2 = st.columns([3, 2])
            col1.write(format_amount(repayment.amount))
            col2.write(repayment.date.astimezone().strftime("%b %d, %Y"))

    col1, col2 = st.columns(2)
    with col1:
        with st.popover("Repayment"):
            repay_amount = st.text_input("Amount", key=f"repay_{loan.id}")
            if st.button("OK", key=f"repay_ok_{loan.id}", type="primary"):
                st.session_state.last_result = ledger.apply_repayment(loan.id, repay_amount)
                st.rerun()
    with col2:
        if st.button("🗑️ Delete", key=f"delete_{loan.id}"):
            st.session_state.last_result = ledger.delete_loan(loan.id)
            st.rerun()


def show_last_result() -> None:
    """Report the outcome of the previous ledger action after a rerun."""
    result: LedgerResult = st.session_state.pop("last_result", None)
    if result is None:
        return
    if result.status == LedgerOutcome.REJECTED:
        show_issues(result.issues)
    elif result.status == LedgerOutcome.NOT_FOUND:
        st.error("That loan no longer exists.")
    elif result.status == LedgerOutcome.SETTLED:
        st.success(f"🎉 {result.loan.recipient} has paid everything back.")
    elif result.status == LedgerOutcome.DELETED:
        st.info(f"Loan to {result.loan.recipient} deleted.")
    warn_if_not_saved(result.persisted)


def render_loans_page(components: AppComponents):
    """Render the loan list and the add-loan form."""
    ledger = components.ledger
    st.title("Loan Management")

    # Load once per session, when the view is first shown
    if not st.session_state.get("loans_loaded"):
        ledger.load()
        st.session_state.loans_loaded = True

    show_last_result()

    loans = ledger.loans
    if not loans:
        st.info("No open loans.")
    for loan in loans:
        render_loan(ledger, loan)

    st.markdown("---")

    with st.form("add_loan", clear_on_submit=True):
        amount = st.text_input("Loan Amount", placeholder="0.00")
        recipient = st.text_input("Friend's Name")
        reason = st.text_input("Reason for Loan")
        submitted = st.form_submit_button("Add Loan", type="primary")

    if submitted:
        result = ledger.add_loan(amount, recipient, reason)
        if result.ok:
            st.session_state.last_result = result
            st.rerun()
        else:
            show_issues(result.issues)


def render_settings_page(components: AppComponents):
    """Render the settings page."""
    st.title("⚙️ Settings")

    st.markdown("### Configuration Status")
    status = validate_all_settings()
    for name, key in [("Storage", "storage"), ("Application", "app")]:
        if status.get(key, False):
            st.success(f"✅ {name} - OK")
        else:
            st.error(f"❌ {name} - {status.get(f'{key}_error', 'Invalid')}")

    st.markdown("### Data Location")
    st.code(str(get_settings().storage.data_dir))

    storage = components.audit_logger.storage
    if storage is not None:
        st.markdown("### Recent Activity")
        for event in storage.get_recent_events(limit=20):
            st.write(
                f"{event.timestamp.astimezone().strftime('%H:%M:%S')} "
                f"- {event.description}"
            )

    st.markdown("---")
    st.markdown(
        "To change where data is stored, set `MONEYMATE_STORAGE_DATA_DIR` "
        "in your environment or in a `.env` file."
    )


if __name__ == "__main__":
    main()
