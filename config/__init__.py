"""Settings modules for the payroll console.

Each module defines DEBUG, LOG_LEVEL and SEED_DEMO_DATA; APP_ENV picks one.
"""

import os

_SETTINGS_BY_ENV = {
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()
    return _SETTINGS_BY_ENV.get(env, "config.development")
