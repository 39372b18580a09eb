"""
File reader for the patient store

Default read capability handed to PatientLoader. It never raises: exactly
one of `data` and `error` is populated on the returned ReadResult.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadResult:
    """Outcome of reading a JSON file"""
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


ReadCapability = Callable[[str], ReadResult]


def read_patient_store(file_path: str) -> ReadResult:
    """
    Read and parse a JSON file

    Args:
        file_path: Concrete path of the patient store

    Returns:
        ReadResult with the parsed content or an error message
    """
    path = Path(file_path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Patient store not found: {file_path}")
        return ReadResult(error=f"File not found: {file_path}")
    except json.JSONDecodeError as e:
        logger.warning(f"Patient store is not valid JSON: {file_path}: {e}")
        return ReadResult(error=f"Invalid JSON in {file_path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read patient store {file_path}: {e}")
        return ReadResult(error=str(e))

    logger.debug(f"Read patient store {file_path}")
    return ReadResult(data=data)
