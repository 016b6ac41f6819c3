"""Configuration settings loaded from .env file."""

from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings, loaded from .env file."""

    # Database
    sqlite_db_path: Path = Path("./data/scriptura.db")
    progress_key: str = "completed_units"

    # Plan
    plan_horizon_days: int = 365
    units_per_period: Union[int, Literal["auto"]] = "auto"

    # Scene descriptions (consumed by renderers)
    scene_endpoint: Optional[str] = None
    scene_timeout_seconds: float = 10.0

    # Logging
    log_dir: Path = Path("./data/logs")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @field_validator("plan_horizon_days")
    @classmethod
    def validate_horizon(cls, v: int) -> int:
        if v < 1:
            raise ValueError("plan_horizon_days must be >= 1")
        return v

    @field_validator("units_per_period")
    @classmethod
    def validate_units_per_period(cls, v):
        if v != "auto" and v < 1:
            raise ValueError("units_per_period must be >= 1 or 'auto'")
        return v

    @field_validator("scene_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("scene_timeout_seconds must be positive")
        return v

    @field_validator("progress_key")
    @classmethod
    def validate_progress_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("progress_key must not be blank")
        return v

    @field_validator("sqlite_db_path", "log_dir")
    @classmethod
    def ensure_parent_dirs(cls, v: Path) -> Path:
        v.parent.mkdir(parents=True, exist_ok=True)
        return v

