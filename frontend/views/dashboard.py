"""
Dashboard: the user's accounts, the create-account form and one detail panel
per account.
"""
import logging
from typing import MutableMapping, Optional

import streamlit as st

from config import (
    ERROR_ACCOUNT_NAME_REQUIRED,
    ERROR_CREATE_ACCOUNT,
    ERROR_LOAD_DATA,
    ERROR_LOGOUT,
)
from utils.data_access import DataAccess, DataAccessError
from utils.duplicates import DuplicateIndex, build_duplicate_index
from utils.formatters import display_name, format_holding_count, format_timestamp_ms
from utils.forms import FormError, validate_account_name
from utils.models import Account, Holding, Identity
from utils.session import IdentityGateway, SessionContext
from views import account_detail
from views.account_detail import AccountDetailController

logger = logging.getLogger(__name__)


class DashboardController:
    """Accounts, all holdings and the duplicate-symbol index of the current identity."""

    def __init__(self, data_access: DataAccess, session: SessionContext):
        self.data_access = data_access
        self.session = session
        self.accounts: list[Account] = []
        self.holdings: list[Holding] = []
        self.duplicate_index: DuplicateIndex = {}
        self.loading = True
        self.error = ""
        self.new_account_name = ""
        self._loaded_version: Optional[int] = None
        self._stale = False
        self._details: dict[str, AccountDetailController] = {}

    def ensure_loaded(self) -> None:
        """Load on first use, after any session change, or once marked stale."""
        identity = self.session.identity
        if identity is None:
            return
        if self.session.version != self._loaded_version or self._stale:
            self.load(identity)

    def reset(self) -> None:
        """Forget everything shown for an earlier session."""
        self.accounts, self.holdings, self.duplicate_index = [], [], {}
        self._details = {}
        self.loading = True
        self.error = ""
        self.new_account_name = ""
        self._loaded_version = None
        self._stale = False

    def load(self, identity: Identity) -> None:
        version = self.session.version
        if version != self._loaded_version:
            self.reset()
        self._loaded_version = version
        self._stale = False

        try:
            accounts = self.data_access.list_accounts(identity.id)
            holdings = self.data_access.list_all_holdings(identity.id)
        except DataAccessError as e:
            logger.error(f"Failed to load dashboard for {identity.id}: {e}")
            self.error = ERROR_LOAD_DATA
            self.loading = False
            return

        if self.session.version != version:
            logger.debug(f"Discarding dashboard data for superseded session of {identity.id}")
            return

        self.accounts = accounts
        self.holdings = holdings
        self.duplicate_index = build_duplicate_index(holdings)
        for controller in self._details.values():
            controller.duplicate_index = self.duplicate_index
        self.loading = False

    def invalidate(self) -> None:
        """Re-derive accounts, counts and the duplicate index on next render."""
        self._stale = True

    def submit_account(self) -> Optional[Account]:
        """Create an account from the form. The name is kept unless creation succeeds."""
        identity = self.session.identity
        if identity is None:
            return None

        try:
            name = validate_account_name(self.new_account_name)
        except FormError:
            self.error = ERROR_ACCOUNT_NAME_REQUIRED
            return None

        try:
            account = self.data_access.create_account(name, identity.id)
        except DataAccessError as e:
            logger.error(f"Failed to create account '{name}': {e}")
            self.error = ERROR_CREATE_ACCOUNT
            return None

        self.accounts = [*self.accounts, account]
        self.new_account_name = ""
        return account

    def logout(self, gateway: IdentityGateway) -> bool:
        try:
            gateway.logout()
        except DataAccessError as e:
            logger.error(f"Logout failed: {e}")
            self.error = ERROR_LOGOUT
            return False
        return True

    def holding_count(self, account_id: str) -> int:
        return len([h for h in self.holdings if h.account_id == account_id])

    def detail_for(self, account: Account) -> AccountDetailController:
        controller = self._details.get(account.id)
        if controller is None:
            controller = AccountDetailController(
                self.data_access,
                self.session,
                account.id,
                duplicate_index=self.duplicate_index,
                on_change=self.invalidate,
            )
            self._details[account.id] = controller
        return controller


# ==================== Rendering ====================

NEW_ACCOUNT_KEY = "new_account_name"
FORM_SESSION_KEY = "form_session_version"


def clear_form_state(state: MutableMapping, session_version: int) -> None:
    """Drop form text typed during an earlier session."""
    if state.get(FORM_SESSION_KEY) == session_version:
        return
    stale = [
        key for key in state
        if key == NEW_ACCOUNT_KEY or str(key).startswith(account_detail.FIELD_KEY_PREFIX)
    ]
    for key in stale:
        del state[key]
    state[FORM_SESSION_KEY] = session_version


def _on_create_account(controller: DashboardController) -> None:
    controller.new_account_name = st.session_state[NEW_ACCOUNT_KEY]
    controller.submit_account()
    st.session_state[NEW_ACCOUNT_KEY] = controller.new_account_name


def _render_create_form(controller: DashboardController) -> None:
    if NEW_ACCOUNT_KEY not in st.session_state:
        st.session_state[NEW_ACCOUNT_KEY] = controller.new_account_name

    st.subheader("New account")
    with st.form("create_account_form"):
        st.text_input("Account name", key=NEW_ACCOUNT_KEY, placeholder="e.g. Broker A")
        st.form_submit_button(
            "Create", on_click=_on_create_account, args=(controller,)
        )


def _render_accounts(controller: DashboardController) -> None:
    if not controller.accounts:
        st.info("You don't have any accounts yet. Create one above!")
        return

    columns = st.columns(3)
    for i, acct in enumerate(controller.accounts):
        with columns[i % 3]:
            with st.container(border=True):
                st.markdown(f"### {acct.name}")
                st.markdown(
                    f'<div class="account-card-meta">'
                    f'{format_holding_count(controller.holding_count(acct.id))}'
                    f' · created {format_timestamp_ms(acct.created_at)}</div>',
                    unsafe_allow_html=True,
                )
                account_detail.render(controller.detail_for(acct))


def render(controller: DashboardController, gateway: IdentityGateway) -> None:
    controller.ensure_loaded()
    clear_form_state(st.session_state, controller.session.version)

    if controller.loading and not controller.error:
        st.info("Loading...")
        return

    col1, col2, col3 = st.columns([6, 1, 1])
    with col1:
        st.title("My securities accounts")
        st.caption(display_name(controller.session.identity))
    with col2:
        st.button("Refresh", on_click=controller.invalidate)
    with col3:
        st.button("Log out", on_click=controller.logout, args=(gateway,))

    if controller.error:
        st.error(controller.error)

    _render_create_form(controller)
    st.divider()
    _render_accounts(controller)
