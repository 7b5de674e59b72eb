"""
FundLedger - Streamlit Application
Buy and redeem fund positions, with balances and transaction history.
"""

import streamlit as st
import logging
from dotenv import load_dotenv

from config import configure_logging, get_settings
from db_engine import init_db
from repositories import UserPreferencesRepository
from services import (
    PortfolioLedger,
    DatabaseTransactionStore,
    LedgerError,
    build_notifier,
    transactions_frame,
    balances_frame,
    fund_summary
)

# Load environment variables
load_dotenv()
configure_logging()

logger = logging.getLogger(__name__)

# Configure Streamlit page
st.set_page_config(
    page_title="FundLedger",
    page_icon="💼",
    layout="wide"
)

# Initialize database
init_db()


# ==================== SESSION STATE ====================
if "ledgers" not in st.session_state:
    st.session_state.ledgers = {}


# ==================== HELPER FUNCTIONS ====================
def get_ledger(user_id: str) -> PortfolioLedger:
    """Get the ledger for a user, creating it on first use in this session."""
    ledgers = st.session_state.ledgers
    if user_id not in ledgers:
        ledgers[user_id] = PortfolioLedger(
            user_id,
            transaction_store=DatabaseTransactionStore(),
            notifier=build_notifier()
        )
        logger.info(f"Opened ledger for user {user_id}")
    return ledgers[user_id]


def render_sidebar() -> str:
    """Render the sidebar with user and notification settings."""
    st.sidebar.title("⚙️ Settings")

    user_id = st.sidebar.text_input("User ID", value="demo-user", help="Opaque user identifier")

    st.sidebar.subheader("📧 Notifications")
    settings = get_settings()
    st.sidebar.caption(f"Channel: {settings.notification_channel}")

    prefs = UserPreferencesRepository.get_by_user(user_id) if user_id else None
    email_input = st.sidebar.text_input(
        "Email Address",
        value=prefs.email_address if prefs and prefs.email_address else "",
        help="Used when the email notification channel is enabled"
    )

    if st.sidebar.button("Save Email", use_container_width=True):
        if user_id and email_input:
            UserPreferencesRepository.save_email(user_id, email_input)
            st.sidebar.success("✅ Email saved!")
        else:
            st.sidebar.warning("⚠️ Please enter a user ID and an email address")

    return user_id


# ==================== MAIN CONTENT ====================
def render_trade_form(ledger: PortfolioLedger):
    """Render the buy/sell form."""
    st.subheader("💱 New Transaction")
    prefix = ledger.fund_prefix

    with st.form("trade_form"):
        col1, col2, col3 = st.columns(3)

        with col1:
            fund_code = st.text_input("Fund Code*", placeholder=f"e.g., {prefix}1")
        with col2:
            amount = st.number_input("Amount*", min_value=0.0, step=1.0, value=0.0)
        with col3:
            operation = st.selectbox("Operation", ["Buy", "Sell"])

        submitted = st.form_submit_button("Submit", use_container_width=True)

        if submitted:
            try:
                if operation == "Buy":
                    transaction_id = ledger.process_buy(fund_code.strip(), amount)
                else:
                    transaction_id = ledger.process_sell(fund_code.strip(), amount)
                st.success(f"✅ {operation} processed. ID: {transaction_id}")
            except LedgerError as e:
                st.error(f"❌ {e}")


def render_balances(ledger: PortfolioLedger):
    """Render fund balances and per-fund totals."""
    st.subheader("📊 Balances")

    balances = balances_frame(ledger)
    if balances.empty:
        st.info("No fund positions yet.")
        return

    col1, col2 = st.columns(2)
    with col1:
        st.metric("Funds", f"{len(balances)}")
    with col2:
        st.metric("Total Balance", f"{balances['balance'].sum():,.2f}")

    st.dataframe(fund_summary(ledger), use_container_width=True)


def render_history(ledger: PortfolioLedger):
    """Render transaction history."""
    st.subheader("📜 Transaction History")

    history = transactions_frame(ledger)
    if history.empty:
        st.info("No transactions recorded.")
        return

    st.dataframe(history, use_container_width=True, hide_index=True)


# ==================== MAIN APP ====================
def main():
    """Main application entry point."""
    st.title("💼 FundLedger")
    st.markdown("*Per-user fund transaction ledger*")

    user_id = render_sidebar()
    if not user_id:
        st.warning("Enter a user ID to open a ledger.")
        return

    ledger = get_ledger(user_id)

    tab1, tab2 = st.tabs(["💱 Trade", "📜 History"])

    with tab1:
        render_trade_form(ledger)
        st.markdown("---")
        render_balances(ledger)

    with tab2:
        render_history(ledger)


if __name__ == "__main__":
    main()
