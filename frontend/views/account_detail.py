"""
Account detail view: the holdings of one account, the add-holding form and
the per-row mark toggle.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional

import streamlit as st

from config import ERROR_ADD_HOLDING, ERROR_LOAD_HOLDINGS, ERROR_MARK_HOLDING
from utils.data_access import DataAccess, DataAccessError
from utils.duplicates import DuplicateIndex, is_highlighted
from utils.formatters import format_quantity
from utils.forms import FormError, validate_holding
from utils.models import Holding
from utils.session import SessionContext
from utils.styles import holding_cell

logger = logging.getLogger(__name__)


@dataclass
class HoldingForm:
    symbol: str = ""
    name: str = ""
    quantity: str = ""

    def clear(self) -> None:
        self.symbol = self.name = self.quantity = ""


class AccountDetailController:
    """State of one account's detail panel.

    Holdings are fetched here independently of the dashboard's own
    all-holdings query. Results for an account id that is no longer the
    current one are discarded.

    The dashboard keeps one controller per account id, so in the app the
    account never changes under a panel. ``set_account`` and the
    superseded-id check in ``apply_holdings`` hold the late-response rule
    for callers that retarget a panel.
    """

    def __init__(
        self,
        data_access: DataAccess,
        session: SessionContext,
        account_id: str,
        duplicate_index: Optional[DuplicateIndex] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.data_access = data_access
        self.session = session
        self.account_id = account_id
        self.duplicate_index: DuplicateIndex = duplicate_index or {}
        self.on_change = on_change
        self.holdings: list[Holding] = []
        self.loading = True
        self.error = ""
        self.opened = True
        self.form = HoldingForm()
        self._loaded_for: Optional[str] = None

    def set_account(self, account_id: str) -> None:
        if account_id != self.account_id:
            self.account_id = account_id
            self.loading = True
            self._loaded_for = None

    def ensure_loaded(self) -> None:
        if self.account_id and self._loaded_for != self.account_id:
            self.load()

    def load(self) -> None:
        requested = self.account_id
        self._loaded_for = requested
        try:
            holdings = self.data_access.list_holdings_by_account(requested)
        except DataAccessError as e:
            logger.error(f"Failed to load holdings of account {requested}: {e}")
            if requested == self.account_id:
                self.error = ERROR_LOAD_HOLDINGS
                self.loading = False
            return
        self.apply_holdings(requested, holdings)

    def apply_holdings(self, account_id: str, holdings: list[Holding]) -> bool:
        """Install a fetch result unless it belongs to a superseded account id."""
        if account_id != self.account_id:
            logger.debug(f"Discarding holdings for superseded account {account_id}")
            return False
        self.holdings = list(holdings)
        self.loading = False
        return True

    def toggle_open(self) -> None:
        self.opened = not self.opened

    def submit_holding(self) -> Optional[Holding]:
        """Validate the form and add the holding. Fields clear only on success."""
        identity = self.session.identity
        if identity is None or not self.account_id:
            return None

        try:
            symbol, name, quantity = validate_holding(
                self.form.symbol, self.form.name, self.form.quantity
            )
        except FormError as e:
            self.error = str(e)
            return None

        try:
            holding = self.data_access.add_holding(
                self.account_id, identity.id, symbol, name, quantity
            )
        except DataAccessError as e:
            logger.error(f"Failed to add {symbol} to account {self.account_id}: {e}")
            self.error = ERROR_ADD_HOLDING
            return None

        self.holdings.append(holding)
        self.form.clear()
        if self.on_change is not None:
            self.on_change()
        return holding

    def toggle_mark(self, holding: Holding) -> bool:
        """Flip the mark of ``holding``'s symbol.

        The backend flips it on every holding of that symbol in every account;
        only this panel's rows are updated locally.
        """
        identity = self.session.identity
        if identity is None:
            return False

        new_state = not holding.is_marked
        try:
            self.data_access.set_marked(holding.symbol, identity.id, new_state)
        except DataAccessError as e:
            logger.error(f"Failed to mark {holding.symbol}: {e}")
            self.error = ERROR_MARK_HOLDING
            return False

        self.holdings = [
            h.model_copy(update={"is_marked": new_state}) if h.symbol == holding.symbol else h
            for h in self.holdings
        ]
        return True

    def is_highlighted(self, holding: Holding) -> bool:
        return is_highlighted(self.duplicate_index, holding.symbol, self.account_id)


# ==================== Rendering ====================


FIELD_KEY_PREFIX = "holding_"


def _field_keys(account_id: str) -> dict[str, str]:
    return {
        name: f"{FIELD_KEY_PREFIX}{name}_{account_id}"
        for name in ("symbol", "name", "quantity")
    }


def _on_submit(controller: AccountDetailController) -> None:
    keys = _field_keys(controller.account_id)
    controller.form.symbol = st.session_state[keys["symbol"]]
    controller.form.name = st.session_state[keys["name"]]
    controller.form.quantity = st.session_state[keys["quantity"]]

    controller.submit_holding()

    # Write back: cleared after success, untouched after failure
    st.session_state[keys["symbol"]] = controller.form.symbol
    st.session_state[keys["name"]] = controller.form.name
    st.session_state[keys["quantity"]] = controller.form.quantity


def _render_add_form(controller: AccountDetailController) -> None:
    keys = _field_keys(controller.account_id)
    for field_name, key in keys.items():
        if key not in st.session_state:
            st.session_state[key] = getattr(controller.form, field_name)

    st.markdown("##### Add holding")
    with st.form(f"add_holding_{controller.account_id}"):
        col1, col2, col3 = st.columns(3)
        with col1:
            st.text_input("Symbol", key=keys["symbol"])
        with col2:
            st.text_input("Name", key=keys["name"])
        with col3:
            st.text_input("Quantity", key=keys["quantity"])
        st.form_submit_button("Add holding", on_click=_on_submit, args=(controller,))


def _render_holdings(controller: AccountDetailController) -> None:
    st.markdown("##### Holdings")

    if not controller.holdings:
        st.info("This account has no holdings yet. Add one above!")
        return

    header = st.columns([2, 4, 2, 2])
    for col, title in zip(header, ("Symbol", "Name", "Quantity", "Mark")):
        col.caption(title)

    for holding in controller.holdings:
        highlighted = controller.is_highlighted(holding)
        col1, col2, col3, col4 = st.columns([2, 4, 2, 2])
        col1.markdown(holding_cell(holding.symbol, highlighted), unsafe_allow_html=True)
        col2.markdown(holding_cell(holding.name, highlighted), unsafe_allow_html=True)
        col3.markdown(
            holding_cell(format_quantity(holding.quantity), highlighted),
            unsafe_allow_html=True,
        )
        col4.button(
            "Marked ★" if holding.is_marked else "Mark ☆",
            key=f"mark_{controller.account_id}_{holding.id}",
            on_click=controller.toggle_mark,
            args=(holding,),
        )


def render(controller: AccountDetailController) -> None:
    if not controller.account_id:
        return

    controller.ensure_loaded()
    if controller.loading:
        st.info("Loading...")
        return

    col1, col2 = st.columns([4, 1])
    with col1:
        st.markdown("**Account details**")
    with col2:
        st.button(
            "Collapse" if controller.opened else "Expand",
            key=f"toggle_{controller.account_id}",
            on_click=controller.toggle_open,
        )

    if controller.error:
        st.error(controller.error)

    if not controller.opened:
        return

    _render_add_form(controller)
    _render_holdings(controller)
