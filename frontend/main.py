import logging

import streamlit as st
from streamlit_option_menu import option_menu

from config import API_URL, APP_NAME, LOG_LEVEL
from utils.api import APIClient
from utils.data_access import DataAccess
from utils.guard import ACCOUNT_PATH, DASHBOARD_PATH, PUBLIC_PATHS, RouteAction, guard
from utils.session import IdentityGateway, SessionContext
from utils.styles import inject_styles
from views import account, dashboard, login

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

NAV_PAGES = {"Dashboard": DASHBOARD_PATH, "Account": ACCOUNT_PATH}


def init_session():
    """Build the per-browser-session objects once and keep them in session state."""
    if "session" in st.session_state:
        return

    data_access = DataAccess(APIClient(API_URL))
    gateway = IdentityGateway(data_access)
    session = SessionContext()
    st.session_state["data_access"] = data_access
    st.session_state["gateway"] = gateway
    st.session_state["session"] = session
    st.session_state["dashboard"] = dashboard.DashboardController(data_access, session)
    session.start(gateway)


def main():
    st.set_page_config(page_title=APP_NAME, layout="wide")
    inject_styles()
    init_session()

    gateway: IdentityGateway = st.session_state["gateway"]
    session: SessionContext = st.session_state["session"]
    controller: dashboard.DashboardController = st.session_state["dashboard"]

    path = st.query_params.get("path", DASHBOARD_PATH)
    decision = guard(session.state, path)

    if decision.action is RouteAction.REDIRECT:
        st.query_params["path"] = decision.path
        st.rerun()
    if decision.action is RouteAction.INTERSTITIAL:
        st.info("Loading...")
        st.stop()

    if path in PUBLIC_PATHS:
        login.render(gateway, path)
        st.stop()

    # --- Sidebar navigation
    with st.sidebar:
        nav_options = list(NAV_PAGES)
        current = next((name for name, p in NAV_PAGES.items() if p == path), "Dashboard")
        page_selected = option_menu(
            menu_title="Navigation",
            options=nav_options,
            icons=["wallet", "gear"],
            default_index=nav_options.index(current),
            key="main_nav",
        )
        if NAV_PAGES[page_selected] != path:
            st.query_params["path"] = NAV_PAGES[page_selected]
            st.rerun()

    # --- Routing
    if path == ACCOUNT_PATH:
        account.render(session, controller, gateway)
    else:
        dashboard.render(controller, gateway)


if __name__ == "__main__":
    main()
