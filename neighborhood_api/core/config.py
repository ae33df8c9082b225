"""
Configuration helpers for the Neighborhood backend.

Routers/services/repositories read their environment through ``get_settings``
so tests can swap values with ``monkeypatch.setenv`` + ``cache_clear``.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

BASE_DIR = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_dir: Path
    neighborhood_db_file: str
    neighborhood_seed_file: str
    default_page_size: int
    log_level: str
    allowed_origins: tuple[str, ...]

    @property
    def neighborhood_db_path(self) -> Path:
        return self.data_dir / self.neighborhood_db_file


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    raw_origins = os.getenv("ALLOWED_ORIGINS", "")
    page_size = _int(os.getenv("DEFAULT_PAGE_SIZE", "10"), 10)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_dir=Path(os.getenv("DATA_DIR") or BASE_DIR / "data"),
        neighborhood_db_file=os.getenv("NEIGHBORHOOD_DB_FILE") or "neighborhood.json",
        neighborhood_seed_file=(os.getenv("NEIGHBORHOOD_SEED_FILE") or "").strip(),
        default_page_size=page_size if page_size > 0 else 10,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        allowed_origins=tuple(o.strip() for o in raw_origins.split(",") if o.strip()),
    )
