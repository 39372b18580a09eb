"""
Patient Filter for the Mediview Patient Directory

Derives the FilteredView shown in the Select Patient dialog from the
loaded collection and the current search query.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from models.patient import Patient

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ('firstname', 'lastname', 'pid')


@dataclass(frozen=True)
class FilteredView:
    """Patients matching a query, plus an advisory if records had to be skipped"""
    patients: Tuple[Patient, ...]
    query: str = ""
    excluded: int = 0
    error: Optional[str] = None

    def __len__(self) -> int:
        return len(self.patients)

    @property
    def is_empty(self) -> bool:
        return not self.patients


def _searchable_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value.lower()


def patient_matches(patient: Patient, query: str) -> bool:
    """
    Case-insensitive substring match against first name, last name and pid

    Raises:
        TypeError: a searched field holds a non-text value
    """
    needle = query.lower()
    return any(needle in _searchable_text(getattr(patient, name)) for name in SEARCH_FIELDS)


def filter_patients(collection: Sequence[Patient], query: str) -> FilteredView:
    """
    Filter a patient collection by a search query

    Never raises. Records that cannot be compared are left out and reported
    through `excluded` and `error`.

    Args:
        collection: Loaded patients, in display order
        query: Search text; empty matches everything

    Returns:
        FilteredView in collection order
    """
    query = "" if query is None else str(query)
    if not query:
        return FilteredView(patients=tuple(collection), query=query)

    matched = []
    excluded = 0
    for patient in collection:
        try:
            if patient_matches(patient, query):
                matched.append(patient)
        except (TypeError, AttributeError) as e:
            excluded += 1
            logger.warning(f"Error filtering patient {getattr(patient, 'id', None)!r}: {e}")

    error = None
    if excluded:
        error = f"Error filtering patients: {excluded} record(s) could not be searched"

    return FilteredView(patients=tuple(matched), query=query, excluded=excluded, error=error)
