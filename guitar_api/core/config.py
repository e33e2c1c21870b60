"""
Configuration helpers for the Guitar Store backend.

Exposes a Settings object that reads environment variables (port, backing
file, persistence flags, log level) so that routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: Path
    no_persist: bool
    strict_load: bool
    log_level: str

    @property
    def persist_enabled(self) -> bool:
        return not self.no_persist


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    data_file = (os.getenv("DATA_FILE") or "").strip()
    return Settings(
        app_env=app_env,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", str(DEFAULT_PORT)), DEFAULT_PORT),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        no_persist=_bool(os.getenv("NO_PERSIST"), app_env == "test"),
        strict_load=_bool(os.getenv("STRICT_LOAD"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
