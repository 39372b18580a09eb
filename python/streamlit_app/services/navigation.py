"""
Navigation host for the Mediview Patient Directory

Maps routes onto the page keys main.py renders. Routing state lives in
Streamlit's session state; it can be swapped for a plain dict in tests.
"""

import logging
from typing import Any, MutableMapping, Optional, Protocol

import streamlit as st

from utils.exceptions import NavigationFailedError

logger = logging.getLogger(__name__)

PAGE_LOGIN = "login"
PAGE_DIRECTORY = "patient_directory"
PAGE_PATIENT_DETAIL = "patient_detail"

STATIC_ROUTES = {
    "/": PAGE_LOGIN,
    "/home": PAGE_DIRECTORY,
}


class Navigator(Protocol):
    """Navigation and focus calls consumed by SelectionFlow"""

    def navigate_to(self, route: str) -> None:
        ...

    def focus_main_window(self) -> None:
        ...


def patient_route(patient_id: Any) -> str:
    return f"/patient/{patient_id}"


class StreamlitNavigator:
    """Navigator backed by session state keys read by main.py"""

    def __init__(self, state: Optional[MutableMapping[str, Any]] = None):
        self.state = state if state is not None else st.session_state

    def navigate_to(self, route: str) -> None:
        if route in STATIC_ROUTES:
            self.state['current_page'] = STATIC_ROUTES[route]
        elif route.startswith("/patient/") and len(route) > len("/patient/"):
            self.state['selected_patient_id'] = route[len("/patient/"):]
            self.state['current_page'] = PAGE_PATIENT_DETAIL
        else:
            raise NavigationFailedError(f"Unknown route: {route}")

        logger.info(f"Navigated to {route}")

    def focus_main_window(self) -> None:
        self.state['focus_requested'] = True
