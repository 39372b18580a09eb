"""
Settings Store for the Mediview Patient Directory

Persistent key-value storage scoped to the local user profile. It outlives
a single screen session and holds the configured server path and the
login state of the desktop user.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """get/set interface consumed by PathConfig and the session manager"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class MemorySettingsStore:
    """In-process store, used for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class JsonSettingsStore:
    """Key-value store persisted as a flat JSON object on disk"""

    def __init__(self, settings_file: str):
        self.settings_file = Path(settings_file).expanduser()

    def _read_all(self) -> Dict[str, str]:
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot read settings file {self.settings_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file {self.settings_file} does not contain an object")
        return data

    def _write_all(self, values: Dict[str, str]) -> None:
        try:
            self.settings_file.parent.mkdir(parents=True, exist_ok=True)
            tmp_file = self.settings_file.with_suffix(self.settings_file.suffix + '.tmp')
            with open(tmp_file, 'w', encoding='utf-8') as f:
                json.dump(values, f, indent=2)
            tmp_file.replace(self.settings_file)
        except OSError as e:
            raise ConfigurationError(f"Cannot write settings file {self.settings_file}: {e}") from e

    def _read_for_update(self) -> Dict[str, str]:
        """Current values, or an empty start when the file is corrupt; the bad file is kept as .bad"""
        try:
            return self._read_all()
        except ConfigurationError as e:
            logger.error(f"Discarding unreadable settings: {e}")
            try:
                self.settings_file.replace(self.settings_file.with_suffix(self.settings_file.suffix + '.bad'))
            except OSError as move_error:
                logger.warning(f"Could not move aside {self.settings_file}: {move_error}")
            return {}

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        values = self._read_for_update()
        values[key] = value
        self._write_all(values)
        logger.debug(f"Stored setting '{key}' in {self.settings_file}")

    def remove(self, key: str) -> None:
        values = self._read_for_update()
        if key in values:
            del values[key]
            self._write_all(values)
