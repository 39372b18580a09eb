"""
Pages Module for the Mediview Patient Directory

Each page is a self-contained module with a `render()` entry point.

Pages:
- login: Sign-in form guarding the directory
- patient_directory: Patient store loading, configuration and selection
- patient_detail: Target of a patient selection
"""

from .login import render_login
from .patient_directory import render_patient_directory
from .patient_detail import render_patient_detail

__all__ = [
    'render_login',
    'render_patient_directory',
    'render_patient_detail'
]
