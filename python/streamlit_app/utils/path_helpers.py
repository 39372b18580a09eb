"""
Path helpers for locating the patient store under a configured server path.
"""

from dataclasses import dataclass
from pathlib import PureWindowsPath, PurePosixPath
from typing import Optional

from utils.config import get_directory_config


@dataclass(frozen=True)
class DatabasePaths:
    """Concrete file locations inside a configured server directory"""
    base: str
    patient: str


def join_store_path(base: str, filename: str) -> str:
    """
    Join a file name onto a base directory, keeping the base's path flavour.

    Paths configured on Windows (drive letter or backslashes) are joined
    with backslashes even when the app runs elsewhere.
    """
    if '\\' in base or (len(base) > 1 and base[1] == ':'):
        return str(PureWindowsPath(base) / filename)
    return str(PurePosixPath(base) / filename)

def get_database_paths(base: str, patient_filename: Optional[str] = None) -> DatabasePaths:
    """
    Resolve the patient store file for a configured server path

    Args:
        base: Configured server directory
        patient_filename: Override for the store file name

    Returns:
        DatabasePaths for the directory
    """
    filename = patient_filename or get_directory_config()['patient_store_filename']
    return DatabasePaths(base=base, patient=join_store_path(base, filename))
