"""Bulk labeling: environment constants and resolved settings."""

from .settings import (
    ConfigurationError,
    LabelingSettings,
    list_page_limit,
    load_settings,
    service_endpoint,
)

__all__ = [
    "ConfigurationError",
    "LabelingSettings",
    "list_page_limit",
    "load_settings",
    "service_endpoint",
]
