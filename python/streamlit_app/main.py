"""
Mediview Patient Directory - Main Application
Local Streamlit viewer for the clinical records stored on a Mediview server folder

This is the main entry point, responsible for:
- Application configuration and logging
- Page routing between login, the patient directory and patient details
- Tearing down the directory session when its screen is left
- Honouring focus requests from the patient hand-off
"""

import streamlit as st
import streamlit.components.v1 as components
import logging

# Import page components
from page_modules import login, patient_directory, patient_detail
from services.navigation import PAGE_DIRECTORY, PAGE_LOGIN, PAGE_PATIENT_DETAIL
from services.session_manager import create_session_manager
from utils import config

logger = logging.getLogger(__name__)

# Configure the Streamlit page
st.set_page_config(
    page_title="Mediview",
    page_icon="🏥",
    layout="wide",
    initial_sidebar_state="expanded",
    menu_items={
        'Get Help': None,
        'Report a bug': None,
        'About': "Mediview Patient Directory"
    }
)

PAGES = {
    PAGE_LOGIN: login.render,
    PAGE_DIRECTORY: patient_directory.render,
    PAGE_PATIENT_DETAIL: patient_detail.render,
}

def initialize_session_state():
    """Initialize session state variables for the application"""
    if 'initialized' not in st.session_state:
        st.session_state.initialized = True
        st.session_state.current_page = PAGE_DIRECTORY
        st.session_state.previous_page = None
        st.session_state.current_patient = None
        st.session_state.selected_patient_id = None

def render_sidebar():
    """Show current patient context and account actions in the sidebar"""
    st.sidebar.markdown("## 👤 Patient Context")

    patient = st.session_state.get('current_patient')
    if patient is not None and st.session_state.current_page == PAGE_PATIENT_DETAIL:
        st.sidebar.markdown(f"""
        **Current Patient:**
        - **Name:** {patient.full_name or 'Unknown'}
        - **Patient ID:** {patient.pid or 'Unknown'}
        """)

        if st.sidebar.button("Back to Patient List"):
            st.session_state.current_patient = None
            st.session_state.selected_patient_id = None
            st.session_state.current_page = PAGE_DIRECTORY
            st.rerun()
    else:
        st.sidebar.info("No patient currently selected")

    if st.session_state.current_page != PAGE_LOGIN:
        st.sidebar.markdown("---")
        if st.sidebar.button("Sign out"):
            create_session_manager().logout()
            patient_directory.leave()
            st.session_state.current_page = PAGE_LOGIN
            st.rerun()

def handle_page_change():
    """Tear down the directory session once its screen is left"""
    page = st.session_state.current_page
    previous = st.session_state.get('previous_page')
    if previous == PAGE_DIRECTORY and page != PAGE_DIRECTORY:
        patient_directory.leave()
    st.session_state.previous_page = page

def handle_focus_request():
    """Bring the viewer window to the front after a patient hand-off"""
    if st.session_state.pop('focus_requested', False):
        components.html("<script>window.parent.focus();</script>", height=0)

def render_main_content():
    """Route to the appropriate page based on navigation state"""
    page = st.session_state.current_page

    try:
        render_page = PAGES.get(page)
        if render_page is None:
            st.error(f"Unknown page: {page}")
        else:
            render_page()

    except Exception as e:
        logger.error(f"Error rendering page '{page}': {e}")
        st.error(f"Error rendering page '{page}': {str(e)}")
        st.markdown("Please try refreshing the page.")

        with st.expander("Error Details (for debugging)"):
            st.exception(e)

def main():
    """Main application entry point"""
    config.load_app_config()

    initialize_session_state()
    handle_page_change()
    handle_focus_request()

    render_sidebar()
    render_main_content()

if __name__ == "__main__":
    main()
