"""
Patient Loader for the Mediview Patient Directory

Reads the patient store through an injected read capability, checks that
it holds a JSON array and returns the records newest first.
"""

import logging
from typing import Any, List, Optional, Tuple

import pandas as pd

from models.patient import Patient
from services.file_reader import ReadCapability, ReadResult, read_patient_store
from utils.exceptions import ConfigMissingError, InvalidFormatError, ReadFailedError
from utils.helpers import EPOCH, parse_timestamp
from utils.path_helpers import get_database_paths

logger = logging.getLogger(__name__)

PatientCollection = Tuple[Patient, ...]


def creation_sort_key(patient: Patient) -> pd.Timestamp:
    """Creation timestamp used for ordering; absent or invalid dates count as the epoch"""
    timestamp = parse_timestamp(patient.creationdate)
    return timestamp if timestamp is not None else EPOCH


def sort_by_creation(patients: List[Patient]) -> PatientCollection:
    """
    Order patients by creation timestamp, most recent first

    sorted() is stable with reverse=True, so patients sharing a timestamp
    keep their order from the store.
    """
    return tuple(sorted(patients, key=creation_sort_key, reverse=True))


class PatientLoader:
    """Loads the patient collection for a configured server path"""

    def __init__(self, read_capability: ReadCapability = read_patient_store,
                 patient_filename: Optional[str] = None):
        self.read_capability = read_capability
        self.patient_filename = patient_filename

    def load(self, path: Optional[str]) -> PatientCollection:
        """
        Load and order the patient store under a server path

        Args:
            path: Configured server path

        Returns:
            Patients ordered newest first

        Raises:
            ConfigMissingError: no path configured; the store is not read
            ReadFailedError: the read capability reported an error
            InvalidFormatError: the content is not a JSON array
        """
        if path is None or not str(path).strip():
            logger.warning("Patient load requested without a configured server path")
            raise ConfigMissingError()

        db_paths = get_database_paths(path, self.patient_filename)
        logger.info(f"Loading patients from {db_paths.patient}")

        result = self._read(db_paths.patient)
        if result.error is not None:
            logger.error(f"Failed to load patient data: {result.error}")
            raise ReadFailedError(result.error)

        if not isinstance(result.data, list):
            logger.error(f"Patient store {db_paths.patient} holds {type(result.data).__name__}, expected a list")
            raise InvalidFormatError()

        patients = self._build_patients(result.data)
        ordered = sort_by_creation(patients)

        logger.info(f"Loaded {len(ordered)} patients")
        logger.debug("Newest patients: %s", [
            {'name': p.full_name, 'creationdate': p.creationdate, 'pid': p.pid}
            for p in ordered[:5]
        ])
        return ordered

    def _read(self, file_path: str) -> ReadResult:
        try:
            return self.read_capability(file_path)
        except Exception as e:
            logger.error(f"Read capability raised for {file_path}: {e}")
            raise ReadFailedError(str(e) or type(e).__name__) from e

    def _build_patients(self, entries: List[Any]) -> List[Patient]:
        patients = []
        seen_ids = set()
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                logger.warning(f"Skipping patient entry {index}: expected an object, got {type(entry).__name__}")
                continue

            patient = Patient.from_dict(entry)
            if patient.id is None:
                logger.warning(f"Patient entry {index} has no id and cannot be opened")
            else:
                id_key = repr(patient.id)
                if id_key in seen_ids:
                    logger.warning(f"Duplicate patient id {patient.id!r} at entry {index}")
                seen_ids.add(id_key)

            patients.append(patient)
        return patients
