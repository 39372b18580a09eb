"""
Input Validation Utilities for the Mediview Patient Directory

Validation functions for user inputs on the login form,
the server path configuration dialog and patient routes.
"""

import re
from typing import Any, Tuple
import logging

logger = logging.getLogger(__name__)

MAX_PATH_LENGTH = 1024

def validate_storage_path(path: str) -> Tuple[bool, str]:
    """
    Validate a server path entered in the configuration dialog

    The path is not checked against the file system; a missing patient
    store is reported by the loader instead.

    Args:
        path: Path to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if path is None or not str(path).strip():
        return False, "Server path is required"

    path = str(path)

    if len(path) > MAX_PATH_LENGTH:
        return False, f"Server path must be less than {MAX_PATH_LENGTH} characters"

    if '\x00' in path:
        return False, "Server path contains invalid characters"

    return True, ""

def is_valid_email(email: str) -> bool:
    """
    Validate email address format

    Args:
        email: Email address to validate

    Returns:
        True if valid email format
    """
    if not email:
        return False

    email = str(email).strip().lower()

    pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'

    return bool(re.match(pattern, email))

def validate_credentials(email: str, password: str) -> Tuple[bool, str]:
    """
    Validate the login form

    Args:
        email: Email address
        password: Password

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not email or not password:
        return False, "Email and password are required"

    if not is_valid_email(email):
        return False, "Please enter a valid email address"

    return True, ""

def validate_patient_id(patient_id: Any) -> Tuple[bool, str]:
    """
    Validate a patient record id before it is put into a route

    Args:
        patient_id: Record id (string or number)

    Returns:
        Tuple of (is_valid, error_message)
    """
    if patient_id is None or isinstance(patient_id, bool):
        return False, "Patient ID is required"

    patient_id = str(patient_id).strip()

    if not patient_id:
        return False, "Patient ID is required"

    if '/' in patient_id or '?' in patient_id or '#' in patient_id:
        return False, "Patient ID contains characters that are not allowed in a route"

    return True, ""
