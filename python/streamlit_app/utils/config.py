"""
Configuration Management for the Mediview Patient Directory

Handles application configuration, environment variables,
and logging setup for local and deployed runs.
"""

import os
import logging
from typing import Dict, Any
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SERVER_PATH = "C:\\Mediview\\resources\\server"

def get_app_config() -> Dict[str, Any]:
    """
    Get application configuration settings

    Returns:
        Dictionary containing app configuration
    """
    try:
        config = {
            'app_name': os.getenv('APP_NAME', 'Mediview Patient Directory'),
            'app_version': os.getenv('APP_VERSION', '1.0.0'),
            'environment': os.getenv('ENVIRONMENT', 'development'),
            'debug': os.getenv('DEBUG', 'true').lower() == 'true',
            'log_level': get_log_level(),
            'pagination_size': int(os.getenv('PAGINATION_SIZE', '25')),
        }

        return config

    except Exception as e:
        logger.error(f"Error loading app configuration: {e}")
        return {
            'app_name': 'Mediview Patient Directory',
            'environment': 'development',
            'debug': True,
            'pagination_size': 25
        }

def get_directory_config() -> Dict[str, Any]:
    """
    Get patient directory settings: fallback server path, store file name
    and the location of the persisted settings file

    Returns:
        Dictionary containing directory configuration
    """
    settings_file = os.getenv(
        'SETTINGS_FILE',
        str(Path.home() / '.mediview' / 'settings.json')
    )
    return {
        'default_server_path': os.getenv('DEFAULT_SERVER_PATH', DEFAULT_SERVER_PATH),
        'patient_store_filename': os.getenv('PATIENT_STORE_FILENAME', 'patient.json'),
        'settings_file': settings_file,
        'storage_path_key': os.getenv('STORAGE_PATH_KEY', 'serverPath'),
    }

def is_development() -> bool:
    """Check if running in development environment"""
    return os.getenv('ENVIRONMENT', 'development').lower() == 'development'

def get_log_level() -> str:
    """Get configured log level"""
    level = os.getenv('LOG_LEVEL', 'INFO').upper()
    valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
    return level if level in valid_levels else 'INFO'

def setup_logging() -> None:
    """Setup application logging configuration"""
    log_level = get_log_level()
    log_format = os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    handlers = [logging.StreamHandler()]
    if not is_development():
        handlers.append(logging.FileHandler(os.getenv('LOG_FILE', 'patient_directory.log')))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=log_format,
        handlers=handlers
    )

    # Streamlit's watchers are noisy at DEBUG
    logging.getLogger('watchdog').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)

    logger.info(f"Logging configured - Level: {log_level}, Environment: {os.getenv('ENVIRONMENT', 'development')}")

def load_environment_file(env_file: str = '.env') -> bool:
    """
    Load environment variables from file

    Existing variables win over values from the file.

    Args:
        env_file: Path to environment file

    Returns:
        True if file was loaded successfully
    """
    env_path = Path(env_file)

    if not env_path.exists():
        logger.debug(f"Environment file not found: {env_file}")
        return False

    try:
        with open(env_path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    os.environ.setdefault(key.strip(), value.strip())

        logger.info(f"Environment file loaded: {env_file}")
        return True

    except OSError as e:
        logger.error(f"Error loading environment file: {e}")
        return False

def load_app_config() -> Dict[str, Any]:
    """
    Load and initialize application configuration

    This function:
    - Loads environment variables from .env in development
    - Sets up logging
    - Returns the complete app configuration

    Returns:
        Dictionary containing application configuration
    """
    if is_development():
        load_environment_file()

    setup_logging()

    config = {
        'app': get_app_config(),
        'directory': get_directory_config(),
    }

    logger.info("Application configuration loaded successfully")
    return config
