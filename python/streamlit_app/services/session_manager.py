"""
Session Manager for the Mediview Patient Directory

Owns the per-screen DirectorySession: login state, the configured server
path, the loaded patients and the selection dialog. A session is created
when the directory screen is entered and torn down when it is left; all
collaborators are passed in rather than looked up globally.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from services.directory_picker import DirectoryPicker, TkDirectoryPicker
from services.navigation import Navigator, StreamlitNavigator
from services.path_config import PathConfig
from services.patient_filter import FilteredView
from services.patient_loader import PatientCollection, PatientLoader
from services.selection_flow import SelectionFlow
from services.settings_store import JsonSettingsStore, KeyValueStore
from utils.config import get_directory_config
from utils.exceptions import ConfigurationError, PatientLoadError
from utils.validators import validate_credentials, validate_storage_path

logger = logging.getLogger(__name__)

EMAIL_KEY = "email"
AUTH_KEY = "authenticated"


@dataclass
class DirectorySession:
    """State of one visit to the patient directory screen"""
    email: Optional[str]
    is_authenticated: bool
    server_path: str
    selection: SelectionFlow
    patients: PatientCollection = ()
    error: Optional[str] = None
    error_kind: Optional[str] = None
    retryable: bool = False
    is_loading: bool = False
    show_config_dialog: bool = False
    loaded: bool = False

    @property
    def view(self) -> FilteredView:
        return self.selection.view

    @property
    def can_retry(self) -> bool:
        """Whether reloading the same path may succeed without reconfiguring"""
        return self.error is not None and self.retryable


class SessionManager:
    """Creates directory sessions and runs their actions"""

    def __init__(self, store: KeyValueStore,
                 loader: Optional[PatientLoader] = None,
                 navigator: Optional[Navigator] = None,
                 picker: Optional[DirectoryPicker] = None,
                 path_config: Optional[PathConfig] = None):
        self.store = store
        self.path_config = path_config or PathConfig(store)
        self.loader = loader or PatientLoader()
        self.navigator = navigator or StreamlitNavigator()
        self.picker = picker or TkDirectoryPicker()

    # Authentication

    def is_authenticated(self) -> bool:
        try:
            return bool(self.store.get(EMAIL_KEY)) and self.store.get(AUTH_KEY) == "true"
        except ConfigurationError as e:
            logger.error(f"Authentication error: {e}")
            return False

    def login(self, email: str, password: str) -> Tuple[bool, str]:
        """Record a desktop login; only the email and an auth flag are persisted"""
        is_valid, message = validate_credentials(email, password)
        if not is_valid:
            return False, message

        self.store.set(EMAIL_KEY, email.strip())
        self.store.set(AUTH_KEY, "true")
        logger.info(f"User logged in: {email.strip()}")
        return True, ""

    def logout(self) -> None:
        self.store.remove(AUTH_KEY)
        logger.info("User logged out")

    # Session lifecycle

    def create_session(self) -> DirectorySession:
        """Build the session for a fresh visit to the directory screen"""
        try:
            email = self.store.get(EMAIL_KEY)
        except ConfigurationError as e:
            logger.error(f"Authentication error: {e}")
            email = None

        return DirectorySession(
            email=email,
            is_authenticated=self.is_authenticated(),
            server_path=self.path_config.resolve_path(),
            selection=SelectionFlow(self.navigator),
        )

    def teardown(self, session: DirectorySession) -> None:
        """Close dialogs and clear transient flags when the screen is left"""
        session.selection.cancel()
        session.show_config_dialog = False
        session.is_loading = False

    # Loading

    def load_patients(self, session: DirectorySession) -> bool:
        """
        Load the patient store for the stored server path

        A failed load keeps the previously loaded patients and records the
        message shown next to the Retry and Configure buttons. A trigger
        arriving while a load is running is ignored.

        Returns:
            True if the collection was replaced
        """
        if session.is_loading:
            logger.info("Patient load already in progress, ignoring trigger")
            return False

        session.is_loading = True
        try:
            patients = self.loader.load(self.path_config.get_stored_path())
        except PatientLoadError as e:
            session.error = e.message
            session.error_kind = e.kind
            session.retryable = e.retryable
            return False
        except Exception as e:
            logger.exception(f"Unexpected error loading patients: {e}")
            session.error = f"Unexpected error: {e}"
            session.error_kind = "unexpected"
            session.retryable = True
            return False
        finally:
            session.is_loading = False
            session.loaded = True

        session.patients = patients
        session.error = None
        session.error_kind = None
        session.retryable = False
        session.selection.refresh(patients)
        return True

    # Configuration dialog

    def open_config(self, session: DirectorySession) -> None:
        session.server_path = self.path_config.resolve_path()
        session.show_config_dialog = True

    def reset_path(self, session: DirectorySession) -> str:
        session.server_path = self.path_config.reset_to_default()
        return session.server_path

    def browse_path(self, session: DirectorySession) -> Optional[str]:
        result = self.picker.pick(default_path=session.server_path)
        if result.selected:
            session.server_path = result.selected
        return result.selected

    def save_path(self, session: DirectorySession, path: str) -> Tuple[bool, str]:
        """Persist the server path, close the dialog and reload"""
        is_valid, message = validate_storage_path(path)
        if not is_valid:
            return False, message

        try:
            self.path_config.store_path(path)
        except ConfigurationError as e:
            logger.error(f"Failed to save server path: {e}")
            return False, str(e)

        session.server_path = path
        session.show_config_dialog = False
        self.load_patients(session)
        return True, ""

    # Selection dialog

    def open_selection(self, session: DirectorySession) -> FilteredView:
        return session.selection.open(session.patients)

    def select_patient(self, session: DirectorySession, patient_id) -> bool:
        return session.selection.select(patient_id)


def create_session_manager() -> SessionManager:
    """SessionManager wired to the settings file from the directory config"""
    return SessionManager(JsonSettingsStore(get_directory_config()['settings_file']))
