"""
Helper Utilities for the Mediview Patient Directory

Common utility functions for timestamp parsing, date formatting,
age calculation and general display helpers.
"""

import pandas as pd
from datetime import datetime, date
from typing import Any, Optional, Union
import logging

logger = logging.getLogger(__name__)

EPOCH = pd.Timestamp(0, tz='UTC')

# pandas reads these as the current time; stored records treat them as invalid
RELATIVE_KEYWORDS = ('now', 'today')

def parse_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """
    Parse a JSON timestamp value into a UTC pandas Timestamp

    Strings are parsed as dates/ISO timestamps (naive values are taken as UTC),
    numbers as milliseconds since the Unix epoch.

    Args:
        value: Raw value from a patient record

    Returns:
        Timestamp, or None when the value is absent or unparseable
    """
    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (int, float)):
            if pd.isna(value):
                return None
            timestamp = pd.to_datetime(value, unit='ms', utc=True)
        elif isinstance(value, str):
            if not value.strip() or value.strip().lower() in RELATIVE_KEYWORDS:
                return None
            timestamp = pd.to_datetime(value.strip(), utc=True)
        elif isinstance(value, (datetime, date)):
            timestamp = pd.to_datetime(value, utc=True)
        else:
            return None
    except (ValueError, TypeError, OverflowError) as e:
        logger.debug(f"Unparseable timestamp {value!r}: {e}")
        return None

    if pd.isna(timestamp):
        return None
    return timestamp

def format_date(date_value: Any, format_str: str = "%Y-%m-%d") -> str:
    """
    Format date values consistently

    Args:
        date_value: Date to format
        format_str: Format string

    Returns:
        Formatted date string
    """
    if date_value is None:
        return "N/A"

    timestamp = parse_timestamp(date_value)
    if timestamp is None:
        # Unparseable text is shown as stored
        return str(date_value) if isinstance(date_value, str) and date_value else "N/A"

    return timestamp.strftime(format_str)

def calculate_age(birth_date: Any,
                  reference_date: Union[datetime, date] = None) -> Optional[int]:
    """
    Calculate age from birth date

    Args:
        birth_date: Date of birth
        reference_date: Reference date (default: today)

    Returns:
        Age in years, or None if the birth date is missing or invalid
    """
    timestamp = parse_timestamp(birth_date)
    if timestamp is None:
        return None

    born = timestamp.date()

    if reference_date is None:
        reference_date = date.today()
    elif isinstance(reference_date, datetime):
        reference_date = reference_date.date()

    age = reference_date.year - born.year

    # Adjust if birthday hasn't occurred this year
    if (reference_date.month, reference_date.day) < (born.month, born.day):
        age -= 1

    return age if age >= 0 else None

def truncate_text(text: Any, max_length: int = 100, suffix: str = "...") -> str:
    """
    Truncate text to specified length

    Args:
        text: Text to truncate
        max_length: Maximum length
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if text is None:
        return ""

    text = str(text)
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix

def display_value(value: Any, default: str = "") -> str:
    """Render a possibly missing record field for a table cell"""
    if value is None:
        return default
    return str(value)

def create_breadcrumbs(current_page: str, patient_name: str = None) -> str:
    """
    Create breadcrumb navigation string

    Args:
        current_page: Current page name
        patient_name: Optional patient name for context

    Returns:
        Breadcrumb string
    """
    breadcrumbs = ["Mediview"]

    if patient_name:
        breadcrumbs.append(f"Patient: {patient_name}")

    breadcrumbs.append(current_page)

    return " > ".join(breadcrumbs)
