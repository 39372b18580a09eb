"""
Utils Module for the Mediview Patient Directory

This module contains utility functions and helpers used throughout the application.

Modules:
- helpers: Timestamp parsing and display helpers
- validators: Input validation for forms and routes
- config: Configuration management and logging setup
- path_helpers: Patient store location under a server path
- exceptions: Error taxonomy for the directory
"""

from .helpers import (
    parse_timestamp, format_date, calculate_age,
    truncate_text, display_value, create_breadcrumbs
)

from .validators import (
    validate_storage_path, validate_credentials,
    validate_patient_id, is_valid_email
)

from .config import (
    get_app_config, get_directory_config,
    is_development, get_log_level
)

from .path_helpers import DatabasePaths, get_database_paths

__all__ = [
    # Helpers
    'parse_timestamp', 'format_date', 'calculate_age',
    'truncate_text', 'display_value', 'create_breadcrumbs',

    # Validators
    'validate_storage_path', 'validate_credentials',
    'validate_patient_id', 'is_valid_email',

    # Config
    'get_app_config', 'get_directory_config',
    'is_development', 'get_log_level',

    # Paths
    'DatabasePaths', 'get_database_paths'
]
