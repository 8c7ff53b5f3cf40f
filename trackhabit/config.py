#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration - application settings and environment variables
"""

import os
from typing import Tuple

from dotenv import load_dotenv

# Project root directory (parent of the package directory)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Data directories
DATA_DIR = os.path.join(PROJECT_ROOT, "data")
DB_DIR = os.path.join(DATA_DIR, "sqlite_db")

# Database path
DB_PATH = os.path.join(DB_DIR, "users.db")

APP_TITLE = "TrackHabit"

# Port settings
DEFAULT_PORT_RANGE = (7860, 7865)


class Config:
    """Holds the application settings"""

    def __init__(self):
        """Load .env and make sure the data directories exist."""
        self._load_env_file()
        self._ensure_directories()

    def _load_env_file(self):
        """Load the .env file from the project root."""
        env_path = os.path.join(PROJECT_ROOT, ".env")
        if os.path.exists(env_path):
            load_dotenv(env_path)
            print("✅ .env file loaded successfully using python-dotenv")
        else:
            print("⚠️  .env file not found. Using default settings")

    def _ensure_directories(self):
        """Create the directories the app writes into."""
        directories = [DB_DIR, os.path.dirname(self.db_path)]
        for directory in directories:
            if directory:
                os.makedirs(directory, exist_ok=True)

    def get_setting(self, key_name: str, default: str = "") -> str:
        """
        Read a setting from the environment.

        Args:
            key_name (str): environment variable name
            default (str): value used when the variable is unset or empty

        Returns:
            str: setting value
        """
        return os.environ.get(key_name) or default

    def _get_int(self, key_name: str, default: int) -> int:
        raw = self.get_setting(key_name)
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError:
            print(f"Warning: {key_name}={raw!r} is not an integer, using {default}")
            return default

    @property
    def db_path(self) -> str:
        """SQLite database file for user accounts."""
        return self.get_setting("TRACKHABIT_DB_PATH", DB_PATH)

    @property
    def app_title(self) -> str:
        """Title shown in the browser tab."""
        return self.get_setting("TRACKHABIT_APP_TITLE", APP_TITLE)

    @property
    def port_range(self) -> Tuple[int, int]:
        """Port range searched for a free server port."""
        start = self._get_int("TRACKHABIT_PORT_START", DEFAULT_PORT_RANGE[0])
        end = self._get_int("TRACKHABIT_PORT_END", DEFAULT_PORT_RANGE[1])
        return start, end


# Shared settings instance
config = Config()
