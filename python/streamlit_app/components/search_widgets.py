"""
Search Widgets Component for the Mediview Patient Directory

Input widgets for the directory screen: the patient search box and the
server path field of the configuration dialog.
"""

import streamlit as st
from typing import Callable, Optional
import logging

logger = logging.getLogger(__name__)

SEARCH_KEY = "patient_search_query"
SERVER_PATH_KEY = "server_path_input"

def clear_search(key: str = SEARCH_KEY) -> None:
    """Reset the search box; call before the box is rendered in this run"""
    st.session_state[key] = ""

def render_search_box(key: str = SEARCH_KEY) -> str:
    """
    Render the patient search box

    Args:
        key: Session state key of the widget

    Returns:
        Current query text
    """
    return st.text_input(
        "Search",
        placeholder="Search by name or patient ID...",
        key=key,
        label_visibility="collapsed"
    )

def set_server_path(path: str, key: str = SERVER_PATH_KEY) -> None:
    """Set the path field; safe from button callbacks"""
    st.session_state[key] = path

def render_path_config_form(on_browse: Callable[[], Optional[str]],
                            on_reset: Callable[[], str],
                            key: str = SERVER_PATH_KEY) -> Optional[str]:
    """
    Render the server path field with Browse and Reset to Default

    Args:
        on_browse: Opens the folder picker, returns the chosen path or None
        on_reset: Returns the fallback path
        key: Session state key of the path field

    Returns:
        The path to save when Save Configuration was pressed, else None
    """
    def _browse():
        selected = on_browse()
        if selected:
            set_server_path(selected, key)

    def _reset():
        set_server_path(on_reset(), key)

    st.caption("Configure the database server path for your application.")

    col1, col2 = st.columns([4, 1])
    with col1:
        st.text_input(
            "Server Path",
            placeholder="Enter the server path",
            key=key
        )
    with col2:
        st.write("")  # spacing
        st.button("Browse", key=f"{key}_browse", on_click=_browse, type="secondary")

    col3, col4 = st.columns([1, 1])
    with col3:
        st.button("Reset to Default", key=f"{key}_reset", on_click=_reset)
    with col4:
        if st.button("Save Configuration", key=f"{key}_save", type="primary"):
            return st.session_state.get(key, "")

    return None
