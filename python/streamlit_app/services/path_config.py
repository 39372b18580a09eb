"""
Path configuration for the patient store

Resolves, stores and resets the server directory under which the patient
store lives. The path is not checked here; PatientLoader reports a missing
or unreadable store.
"""

import logging
from typing import Optional

from services.settings_store import KeyValueStore
from utils.config import get_directory_config
from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class PathConfig:
    """Reads and writes the configured server path"""

    def __init__(self, store: KeyValueStore, key: Optional[str] = None,
                 default_path: Optional[str] = None):
        directory_config = get_directory_config()
        self.store = store
        self.key = key or directory_config['storage_path_key']
        self.default_path = default_path or directory_config['default_server_path']

    def get_stored_path(self) -> Optional[str]:
        """Return the persisted path, or None if it was never set or cannot be read"""
        try:
            value = self.store.get(self.key)
        except ConfigurationError as e:
            logger.error(f"Failed to read stored server path: {e}")
            return None
        return value or None

    def store_path(self, path: str) -> None:
        """Persist the path, overwriting any previous value"""
        self.store.set(self.key, path)
        logger.info(f"Server path saved: {path}")

    def reset_to_default(self) -> str:
        """Return the fallback path; the caller saves it to persist the reset"""
        return self.default_path

    def resolve_path(self) -> str:
        """Stored path, or the fallback when none is stored"""
        return self.get_stored_path() or self.default_path
