"""Settings Manager - Handles dictionary API and storage configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_DICTIONARY_API_URL = "https://dictionaryapi.com/api/v3/references/sd3/json"
DEFAULT_DATA_FILENAME = ".word_lookup.db"


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the .env file in the project root, falling back to
    the process environment.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_dictionary_api_key(self) -> Optional[str]:
        """Get the dictionary API key from environment."""
        key = os.getenv("DICTIONARY_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_dictionary_api_url(self) -> str:
        url = os.getenv("DICTIONARY_API_URL")
        return url.strip().rstrip("/") if url and url.strip() else DEFAULT_DICTIONARY_API_URL

    def get_data_path(self) -> Path:
        """Location of the SQLite file holding user activity."""
        value = os.getenv("WORD_LOOKUP_DATA_PATH")
        if value and value.strip():
            return Path(value.strip()).expanduser()
        return self._project_root / DEFAULT_DATA_FILENAME

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
