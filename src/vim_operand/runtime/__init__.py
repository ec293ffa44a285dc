"""Runtime services: settings and telemetry."""

from .settings import EngineSettings, get_settings, load_settings, reset_settings

__all__ = [
    "EngineSettings",
    "get_settings",
    "load_settings",
    "reset_settings",
]
