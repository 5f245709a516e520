import logging

import streamlit as st

from utils.data_access import AuthError
from utils.guard import LOGIN_PATH, REGISTER_PATH
from utils.session import IdentityGateway

logger = logging.getLogger(__name__)


def _go(path: str) -> None:
    st.query_params["path"] = path


def _render_login(gateway: IdentityGateway) -> None:
    st.subheader("Login")
    with st.form("login_form"):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

        if submitted:
            if not email or not password:
                st.warning("Please enter email and password")
            else:
                try:
                    gateway.login(email.strip(), password)
                except AuthError as e:
                    logger.error(f"Login failed for {email}: {e}")
                    st.error(f"Login failed: {e}")
                else:
                    st.rerun()

    st.button("No account yet? Register", on_click=_go, args=(REGISTER_PATH,))


def _render_register(gateway: IdentityGateway) -> None:
    st.subheader("Register")
    with st.form("register_form"):
        email = st.text_input("Email")
        display_name = st.text_input("Display name (optional)")
        new_password = st.text_input("Password", type="password", help="Minimum 8 characters")
        confirm_password = st.text_input("Confirm Password", type="password")
        submitted = st.form_submit_button("Register")

        if submitted:
            if not all([email, new_password, confirm_password]):
                st.warning("Please fill all fields")
            elif new_password != confirm_password:
                st.error("Passwords do not match")
            else:
                try:
                    gateway.register(email.strip(), new_password, display_name.strip() or None)
                except AuthError as e:
                    logger.error(f"Registration failed for {email}: {e}")
                    st.error(f"Registration failed: {e}")
                else:
                    st.rerun()

    st.button("Already registered? Log in", on_click=_go, args=(LOGIN_PATH,))


def render(gateway: IdentityGateway, path: str):
    if path == REGISTER_PATH:
        _render_register(gateway)
    else:
        _render_login(gateway)
