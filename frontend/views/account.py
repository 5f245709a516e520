import streamlit as st

from utils.formatters import display_name
from utils.session import IdentityGateway, SessionContext
from views.dashboard import DashboardController


def render(session: SessionContext, dashboard: DashboardController, gateway: IdentityGateway):
    st.title("My Account")

    identity = session.identity
    if identity is None:
        return

    st.subheader("Profile Information")
    col1, col2 = st.columns(2)
    with col1:
        st.write(f"**Name:** {display_name(identity)}")
        st.write(f"**Email:** {identity.email}")
    with col2:
        st.write(f"**ID:** {identity.id}")

    st.divider()

    if dashboard.error:
        st.error(dashboard.error)

    if st.button("Log out", use_container_width=True):
        if dashboard.logout(gateway):
            st.rerun()
