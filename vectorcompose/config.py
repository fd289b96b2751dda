"""Package configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    vectorcompose_env: str = "development"
    vectorcompose_log_level: str = "info"

    # Absolute tolerance for isclose() comparisons on vectors, points and bounds
    vectorcompose_tolerance: float = 1e-9

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
