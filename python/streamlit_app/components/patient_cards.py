"""
Patient Cards Component for the Mediview Patient Directory

Patient display components: the selection table used in the
Select Patient dialog and the summary card on the detail page.
"""

import streamlit as st
import pandas as pd
from typing import Callable, Sequence
import logging

from models.patient import Patient
from utils.helpers import display_value, format_date

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ['First Name', 'Last Name', 'Patient ID', 'Gender', 'Age']
COLUMN_WIDTHS = [3, 3, 2, 1.5, 1, 1]

def patients_to_frame(patients: Sequence[Patient]) -> pd.DataFrame:
    """
    Build the selection table for a list of patients

    Args:
        patients: Patients in display order

    Returns:
        DataFrame with the table columns, indexed by record id
    """
    frame = pd.DataFrame(
        [p.to_display_row() for p in patients],
        columns=TABLE_COLUMNS
    )
    frame.index = [display_value(p.id) for p in patients]
    return frame

def render_patient_table(patients: Sequence[Patient], on_select: Callable[[Patient], None],
                         per_page: int = 25, key: str = "patient_table") -> None:
    """
    Render the patient table with an Open button per row

    Args:
        patients: Patients to show
        on_select: Called with the clicked patient
        per_page: Rows per page
        key: Unique key prefix for widgets
    """
    if not patients:
        st.info("No patients found")
        return

    total = len(patients)
    page_patients = patients
    if total > per_page:
        total_pages = (total - 1) // per_page + 1
        page = st.selectbox(
            f"Page (showing {per_page} of {total} patients)",
            range(1, total_pages + 1),
            key=f"{key}_page"
        )
        start_idx = (page - 1) * per_page
        end_idx = min(start_idx + per_page, total)
        page_patients = patients[start_idx:end_idx]
        st.caption(f"Showing patients {start_idx + 1}-{end_idx} of {total}")

    header = st.columns(COLUMN_WIDTHS)
    for column, title in zip(header, TABLE_COLUMNS):
        column.markdown(f"**{title}**")

    frame = patients_to_frame(page_patients)
    for position, (patient, (_, row)) in enumerate(zip(page_patients, frame.iterrows())):
        cells = st.columns(COLUMN_WIDTHS)
        for column, title in zip(cells, TABLE_COLUMNS):
            column.write(row[title] if row[title] != "" else " ")
        # Position keeps keys unique when ids are missing or repeated
        if cells[-1].button("Open", key=f"{key}_open_{position}_{patient.id}",
                            disabled=patient.id is None):
            on_select(patient)

def render_patient_card(patient: Patient) -> None:
    """
    Render a summary card for a single patient

    Args:
        patient: Patient to show
    """
    with st.container(border=True):
        col1, col2, col3 = st.columns([3, 2, 2])

        with col1:
            st.markdown(f"### {patient.full_name or 'Unnamed patient'}")
            st.text(f"Patient ID: {display_value(patient.pid, 'N/A')}")

        with col2:
            age = patient.age
            st.markdown("**Demographics**")
            st.text(f"Gender: {display_value(patient.sex, 'Unknown')}")
            st.text(f"Age: {age if age is not None else 'Unknown'}")
            st.text(f"Born: {format_date(patient.birthday)}")

        with col3:
            st.markdown("**Record**")
            st.text(f"Created: {format_date(patient.creationdate)}")
            st.text(f"Record ID: {display_value(patient.id, 'N/A')}")
