"""
Components Module for the Mediview Patient Directory

This module contains reusable UI components used by the pages.

Components:
- patient_cards: Patient selection table and summary card
- search_widgets: Search box and server path configuration form
"""

from .patient_cards import patients_to_frame, render_patient_table, render_patient_card
from .search_widgets import render_search_box, render_path_config_form

__all__ = [
    'patients_to_frame',
    'render_patient_table',
    'render_patient_card',
    'render_search_box',
    'render_path_config_form'
]
