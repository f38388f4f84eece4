"""Configuration for the project manager, read from the environment."""

import os
from pathlib import Path

TRUE_VALUES = {'1', 'true', 'yes', 'y', 'on'}

DEFAULT_DATA_SOURCE = str(Path(__file__).resolve().parent / 'static' / 'data.json')


def _env(name, default=''):
    return str(os.getenv(name, default)).strip()


def _env_bool(name, default):
    raw = _env(name, '1' if default else '0').lower()
    return raw in TRUE_VALUES


class Config:
    """Default settings; each one can be overridden by an environment variable."""

    def __init__(self):
        self.PROJECT_DATA_SOURCE = _env('PROJECT_DATA_SOURCE', DEFAULT_DATA_SOURCE)
        self.SECRET_KEY = _env('PROJECT_SECRET_KEY', 'dev-not-secure-change-me')
        self.LOG_LEVEL = _env('PROJECT_LOG_LEVEL', 'INFO').upper() or 'INFO'
        self.DEBUG = _env_bool('PROJECT_DEBUG', False)
