"""
Selection Flow for the Mediview Patient Directory

Coordinates the Select Patient dialog: opening it, live filtering, and the
hand-off to the patient detail page. A failed hand-off is logged and the
flow still closes the dialog.
"""

import logging
from enum import Enum
from typing import Optional, Sequence

from models.patient import Patient
from services.navigation import Navigator, patient_route
from services.patient_filter import FilteredView, filter_patients
from utils.exceptions import NavigationFailedError
from utils.validators import validate_patient_id

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    IDLE = "idle"
    AWAITING_SELECTION = "awaiting_selection"
    NAVIGATING = "navigating"
    FAILED = "failed"


class SelectionFlow:
    """State machine behind the Select Patient dialog"""

    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.state = SelectionState.IDLE
        self.query = ""
        self.collection: Sequence[Patient] = ()
        self.view = FilteredView(patients=())
        self.last_error: Optional[Exception] = None

    @property
    def dialog_open(self) -> bool:
        return self.state is SelectionState.AWAITING_SELECTION

    def open(self, collection: Sequence[Patient]) -> FilteredView:
        """Open the dialog with a cleared query over the current collection"""
        self.collection = collection
        self.query = ""
        self.last_error = None
        self.view = filter_patients(collection, self.query)
        self.state = SelectionState.AWAITING_SELECTION
        return self.view

    def update_query(self, query: str) -> FilteredView:
        """Recompute the view for a new query"""
        self.query = query or ""
        self.view = filter_patients(self.collection, self.query)
        return self.view

    def refresh(self, collection: Sequence[Patient]) -> FilteredView:
        """Recompute the view after the collection was replaced"""
        self.collection = collection
        self.view = filter_patients(collection, self.query)
        return self.view

    def select(self, patient_id) -> bool:
        """
        Hand off to the patient detail page

        Returns:
            True if navigation and focus both succeeded
        """
        if self.state is not SelectionState.AWAITING_SELECTION:
            logger.debug(f"Ignoring selection of {patient_id!r} while {self.state.value}")
            return False

        self.state = SelectionState.NAVIGATING
        try:
            is_valid, message = validate_patient_id(patient_id)
            if not is_valid:
                raise NavigationFailedError(message)

            self.navigator.navigate_to(patient_route(patient_id))
            self.navigator.focus_main_window()
            return True
        except Exception as e:
            self.state = SelectionState.FAILED
            self.last_error = e
            logger.error(f"Navigation error: {e}")
            return False
        finally:
            self._close()

    def cancel(self) -> None:
        """Abandon the selection; nothing else changes"""
        if self.state is SelectionState.AWAITING_SELECTION:
            logger.debug("Patient selection cancelled")
        self._close()

    def _close(self) -> None:
        self.state = SelectionState.IDLE
