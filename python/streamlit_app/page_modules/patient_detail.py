"""
Patient Detail Page for the Mediview Patient Directory

Navigation target of the Select Patient dialog (`/patient/<id>`).
"""

import streamlit as st
import logging
from typing import Optional

from components import patient_cards
from models.patient import Patient
from services.session_manager import create_session_manager
from utils.exceptions import PatientLoadError
from utils.helpers import create_breadcrumbs

logger = logging.getLogger(__name__)

def render():
    """Entry point called by main.py"""
    render_patient_detail()

def _find_patient(patient_id: str) -> Optional[Patient]:
    current = st.session_state.get('current_patient')
    if isinstance(current, Patient) and str(current.id) == str(patient_id):
        return current

    # Opened without going through the dialog, e.g. after a browser refresh
    manager = create_session_manager()
    try:
        patients = manager.loader.load(manager.path_config.get_stored_path())
    except PatientLoadError as e:
        logger.error(f"Could not load patient {patient_id}: {e}")
        st.error(e.message)
        return None

    for patient in patients:
        if patient.id is not None and str(patient.id) == str(patient_id):
            st.session_state.current_patient = patient
            return patient
    return None

def render_patient_detail():
    patient_id = st.session_state.get('selected_patient_id')
    if not patient_id:
        st.info("No patient selected")
        return

    patient = _find_patient(patient_id)
    if patient is None:
        st.warning(f"Patient {patient_id} was not found in the patient database")
        return

    st.caption(create_breadcrumbs("Patient Details", patient.full_name))
    patient_cards.render_patient_card(patient)

    with st.expander("Source record"):
        st.json(dict(patient.raw))
