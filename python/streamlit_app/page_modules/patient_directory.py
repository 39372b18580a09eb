"""
Patient Directory Page for the Mediview Patient Directory

The home screen: loads the local patient store, offers Retry/Configure
when that fails, and opens the Select Patient dialog with live search.
"""

import streamlit as st
import logging

from components import patient_cards, search_widgets
from models.patient import Patient
from services.navigation import StreamlitNavigator
from services.session_manager import DirectorySession, SessionManager, create_session_manager
from utils.config import get_app_config

logger = logging.getLogger(__name__)

SESSION_KEY = "directory_session"

ERROR_HINTS = {
    'config_missing': "Set the server path to the folder that contains the patient database.",
    'read_failed': "Check that the server folder is reachable, then retry or pick another folder.",
    'invalid_format': "The patient database was read but is not a list of patients. Choose another folder.",
}

def render():
    """Entry point called by main.py"""
    render_patient_directory()

def get_session(manager: SessionManager) -> DirectorySession:
    """Current directory session, created on screen entry"""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = manager.create_session()
    return st.session_state[SESSION_KEY]

def leave(manager: SessionManager = None) -> None:
    """Tear down the directory session when another page takes over"""
    session = st.session_state.pop(SESSION_KEY, None)
    if session is not None:
        (manager or create_session_manager()).teardown(session)
        logger.debug("Directory session torn down")

def render_patient_directory():
    """Main entry point for the patient directory page"""
    manager = create_session_manager()
    session = get_session(manager)

    if not session.is_authenticated:
        leave(manager)
        StreamlitNavigator().navigate_to("/")
        st.rerun()

    if not session.loaded:
        with st.spinner("Loading..."):
            manager.load_patients(session)

    if session.error:
        _render_error(manager, session)
        return

    _render_welcome(manager, session)

def _render_error(manager: SessionManager, session: DirectorySession):
    """Error message with the Retry and Configure recovery actions"""
    st.error(session.error)
    hint = ERROR_HINTS.get(session.error_kind)
    if hint:
        st.caption(hint)

    # Errors that a reload cannot fix lead with Configure
    retry_type, configure_type = ("primary", "secondary") if session.can_retry else ("secondary", "primary")

    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        if st.button("Retry", type=retry_type):
            manager.load_patients(session)
            st.rerun()
    with col2:
        if st.button("Configure", type=configure_type):
            manager.open_config(session)
            search_widgets.set_server_path(session.server_path)
            _config_dialog(manager, session)

@st.dialog("Database Configuration")
def _config_dialog(manager: SessionManager, session: DirectorySession):
    path = search_widgets.render_path_config_form(
        on_browse=lambda: manager.browse_path(session),
        on_reset=lambda: manager.reset_path(session),
    )
    if path is not None:
        saved, message = manager.save_path(session, path)
        if saved:
            st.rerun()
        else:
            st.error(message)

def _render_welcome(manager: SessionManager, session: DirectorySession):
    st.title("Welcome")
    st.caption(f"{len(session.patients)} patients loaded from {session.server_path}")

    if st.button("Open Patient", type="primary"):
        manager.open_selection(session)
        search_widgets.clear_search()
        _select_patient_dialog(manager, session)

@st.dialog("Select Patient", width="large")
def _select_patient_dialog(manager: SessionManager, session: DirectorySession):
    query = search_widgets.render_search_box()
    view = session.selection.update_query(query)

    if view.error:
        st.warning(view.error)

    def _on_select(patient: Patient):
        if manager.select_patient(session, patient.id):
            # Detail page reads the record from here instead of reloading the store
            st.session_state.current_patient = patient
        st.rerun()

    per_page = get_app_config().get('pagination_size', 25)
    patient_cards.render_patient_table(view.patients, on_select=_on_select, per_page=per_page)

    if st.button("Cancel"):
        session.selection.cancel()
        st.rerun()
