import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_OVERRIDE_KEYS = frozenset({
    "strict_mutations",
    "log_level",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Admin Dashboard Store"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Local persistence: one <key>.json file per collection
    data_dir: str = "data"

    # Record identifiers
    id_length: int = 7
    id_max_attempts: int = 16

    # Unknown id on update/delete: ignore (False) or raise EntityNotFoundError (True)
    strict_mutations: bool = False

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "INFO"            # EntityStore seed/mutation events
    log_level_storage: str = "WARNING"       # LocalJsonStorage file I/O

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime overrides from data/settings.json into settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key in _OVERRIDE_KEYS:
                    if key in overrides and isinstance(overrides[key], type(getattr(self, key))):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
