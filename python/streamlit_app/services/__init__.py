"""
Services Module for the Mediview Patient Directory

This module contains the data and control logic behind the directory screen:
path configuration, loading, filtering, selection and the session that ties
them together.
"""

from .settings_store import JsonSettingsStore, MemorySettingsStore
from .file_reader import ReadResult, read_patient_store
from .path_config import PathConfig
from .patient_loader import PatientLoader, sort_by_creation
from .patient_filter import FilteredView, filter_patients
from .selection_flow import SelectionFlow, SelectionState
from .navigation import StreamlitNavigator
from .directory_picker import PickResult, TkDirectoryPicker
from .session_manager import DirectorySession, SessionManager, create_session_manager

__all__ = [
    'JsonSettingsStore',
    'MemorySettingsStore',
    'ReadResult',
    'read_patient_store',
    'PathConfig',
    'PatientLoader',
    'sort_by_creation',
    'FilteredView',
    'filter_patients',
    'SelectionFlow',
    'SelectionState',
    'StreamlitNavigator',
    'PickResult',
    'TkDirectoryPicker',
    'DirectorySession',
    'SessionManager',
    'create_session_manager'
]
