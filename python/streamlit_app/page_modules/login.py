"""
Login Page for the Mediview Patient Directory
"""

import streamlit as st
import logging

from services.navigation import StreamlitNavigator
from services.session_manager import create_session_manager
from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

def render():
    """Entry point called by main.py"""
    render_login()

def render_login():
    manager = create_session_manager()

    if manager.is_authenticated():
        StreamlitNavigator().navigate_to("/home")
        st.rerun()

    st.title("Sign in")

    with st.form("login_form", enter_to_submit=True):
        email = st.text_input("Email")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")

    if submitted:
        try:
            ok, message = manager.login(email, password)
        except ConfigurationError as e:
            logger.error(f"Login failed: {e}")
            st.error("Could not save the login. Check the settings file location.")
            return

        if not ok:
            st.warning(message)
            return

        StreamlitNavigator().navigate_to("/home")
        st.rerun()
