"""
FastAPI dependency injection.

An endpoint declares `settings: Settings = Depends(get_settings)` and
FastAPI calls get_settings() before the endpoint runs. Tests replace it
through app.dependency_overrides[get_settings] to use smaller limits.
"""

from config.settings import Settings, settings


def get_settings() -> Settings:
    """Returns the process-wide settings singleton."""
    return settings
