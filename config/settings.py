"""
Centralized configuration using pydantic-settings.

How it works:
- Reads environment variables automatically (e.g., MAX_TIME_UNIT env var → Settings.MAX_TIME_UNIT)
- Falls back to defaults defined here if env vars are not set
- Can also read from a .env file in the project root

Routers get settings through api.dependencies.get_settings so tests can
swap in their own values.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Simulator limits ────────────────────────────────────────
    MAX_TIME_UNIT: int = 500   # ceiling for arrival and burst values
    MAX_PROCESSES: int = 50    # rows accepted per simulation request

    # ── Site ────────────────────────────────────────────────────
    SITE_OWNER: str = "Kenneth John Minguito"

    # ── App ─────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Module-level singleton; routers reach it through get_settings()
settings = Settings()
