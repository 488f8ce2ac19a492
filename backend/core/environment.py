"""
Environment variable readers and database configuration

Settings never hardcode deployment values. Every value comes from the
process environment (populated from .env by python-dotenv in settings.py)
through the helpers below.

Supported environments:
- test: in-memory SQLite unless DB_ENGINE says otherwise
- development: local SQLite file or a local PostgreSQL
- staging: PostgreSQL, credentials required, SSL required
- production: PostgreSQL, credentials required, SSL verified

Usage:
    from core.environment import get_database_config

    DATABASES = {'default': get_database_config('development')}
"""

import os
from pathlib import Path
from typing import List, Optional

# Base directory (backend root)
BASE_DIR = Path(__file__).resolve().parent.parent

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off', ''}

SQLITE_ENGINE = 'django.db.backends.sqlite3'
POSTGRES_ENGINE = 'django.db.backends.postgresql'

REQUIRED_DB_VARS = ['DB_NAME', 'DB_USER', 'DB_PASSWORD', 'DB_HOST']


# ============================================================================
# VARIABLE READERS
# ============================================================================

def get_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a string variable, treating blank values as unset"""
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_bool(name: str, default: bool = False) -> bool:
    """
    Read a boolean variable.

    Accepts 1/0, true/false, yes/no, on/off in any case.

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    value = os.getenv(name)
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False

    raise ValueError(f"Environment variable {name} must be a boolean, got '{value}'")


def get_int(name: str, default: int) -> int:
    """
    Read an integer variable.

    Raises:
        ValueError: If the value is not an integer
    """
    value = get_str(name)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"Environment variable {name} must be an integer, got '{value}'"
        )


def get_list(name: str, default: Optional[List[str]] = None) -> List[str]:
    """Read a comma-separated variable, dropping blank items"""
    value = get_str(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(',') if item.strip()]


def get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read a secret exactly as given; only an empty value counts as unset"""
    value = os.getenv(name)
    if not value:
        return default
    return value


# ============================================================================
# DATABASE CONFIGURATION
# ============================================================================

COMMON_POSTGRES_SETTINGS = {
    'ENGINE': POSTGRES_ENGINE,
    'CONN_MAX_AGE': 60,
    'ATOMIC_REQUESTS': True,
    'OPTIONS': {
        'connect_timeout': 10,
        'application_name': 'django-rest-in-style',
    },
}


def get_all_environments() -> list:
    """Supported environment names"""
    return ['test', 'development', 'staging', 'production']


def validate_environment(environment: str) -> bool:
    return environment in get_all_environments()


def get_database_config(environment: str) -> dict:
    """
    Get database configuration for specified environment.

    Args:
        environment: One of 'test', 'development', 'staging', 'production'

    Returns:
        Dictionary with Django database configuration

    Raises:
        ValueError: If environment is not recognized, or if a deployed
            environment is missing required credentials

    Examples:
        >>> get_database_config('test')['ENGINE']
        'django.db.backends.sqlite3'
    """
    config_functions = {
        'test': _get_test_config,
        'development': _get_development_config,
        'staging': _get_staging_config,
        'production': _get_production_config,
    }

    if environment not in config_functions:
        valid_envs = ', '.join(config_functions.keys())
        raise ValueError(
            f"Invalid environment '{environment}'. "
            f"Must be one of: {valid_envs}"
        )

    return config_functions[environment]()


def _get_test_config() -> dict:
    """
    Test environment configuration.

    SQLite in memory unless DB_ENGINE selects PostgreSQL, in which case
    the same variables as development apply.
    """
    if get_str('DB_ENGINE', SQLITE_ENGINE) == POSTGRES_ENGINE:
        config = _get_development_config()
        config['TEST'] = {'NAME': get_str('DB_NAME', 'test_rest_in_style')}
        return config

    return {
        'ENGINE': SQLITE_ENGINE,
        'NAME': ':memory:',
    }


def _get_development_config() -> dict:
    """
    Development environment configuration.

    Defaults to a SQLite file next to manage.py so the project runs with
    no services. Set DB_ENGINE to use a local PostgreSQL.
    """
    engine = get_str('DB_ENGINE', SQLITE_ENGINE)
    if engine == SQLITE_ENGINE:
        return {
            'ENGINE': SQLITE_ENGINE,
            'NAME': get_str('DB_NAME', str(BASE_DIR / 'db.sqlite3')),
        }

    return {
        **COMMON_POSTGRES_SETTINGS,
        'ENGINE': engine,
        'NAME': get_str('DB_NAME', 'rest_in_style_dev'),
        'USER': get_str('DB_USER', 'postgres'),
        'PASSWORD': get_secret('DB_PASSWORD', 'postgres'),
        'HOST': get_str('DB_HOST', 'localhost'),
        'PORT': get_str('DB_PORT', '5432'),
        'OPTIONS': {
            **COMMON_POSTGRES_SETTINGS['OPTIONS'],
            'sslmode': 'disable',
        },
    }


def _require_db_vars(environment: str):
    missing_vars = [
        var for var in REQUIRED_DB_VARS
        if not (get_secret(var) if var == 'DB_PASSWORD' else get_str(var))
    ]

    if missing_vars:
        raise ValueError(
            f"Missing required environment variables for {environment}: "
            f"{', '.join(missing_vars)}"
        )


def _get_staging_config() -> dict:
    """
    Staging environment configuration.

    PostgreSQL with SSL required. Credentials must come from the environment.
    """
    _require_db_vars('staging')

    return {
        **COMMON_POSTGRES_SETTINGS,
        'NAME': get_str('DB_NAME'),
        'USER': get_str('DB_USER'),
        'PASSWORD': get_secret('DB_PASSWORD'),
        'HOST': get_str('DB_HOST'),
        'PORT': get_str('DB_PORT', '5432'),
        'CONN_MAX_AGE': 300,
        'OPTIONS': {
            **COMMON_POSTGRES_SETTINGS['OPTIONS'],
            'sslmode': 'require',
        },
    }


def _get_production_config() -> dict:
    """
    Production environment configuration.

    PostgreSQL with full certificate verification and the longest
    connection reuse.
    """
    _require_db_vars('production')

    return {
        **COMMON_POSTGRES_SETTINGS,
        'NAME': get_str('DB_NAME'),
        'USER': get_str('DB_USER'),
        'PASSWORD': get_secret('DB_PASSWORD'),
        'HOST': get_str('DB_HOST'),
        'PORT': get_str('DB_PORT', '5432'),
        'CONN_MAX_AGE': 600,
        'OPTIONS': {
            **COMMON_POSTGRES_SETTINGS['OPTIONS'],
            'sslmode': 'verify-full',
            'sslrootcert': get_str(
                'DB_SSL_ROOT_CERT', str(BASE_DIR / 'certs' / 'ca-bundle.pem')
            ),
        },
    }


def get_connection_info(environment: str, config: Optional[dict] = None) -> dict:
    """
    Human-readable connection information (password masked).

    Describes config when given, such as a live connection's settings_dict,
    otherwise the configuration the environment would produce.

    Example:
        get_connection_info('development')['password']
        '***'
    """
    if config is None:
        config = get_database_config(environment)

    return {
        'environment': environment,
        'engine': config['ENGINE'],
        'host': config.get('HOST', ''),
        'port': config.get('PORT', ''),
        'database': str(config['NAME']),
        'user': config.get('USER', ''),
        'password': '***',
        'ssl_mode': config.get('OPTIONS', {}).get('sslmode', 'N/A'),
    }
