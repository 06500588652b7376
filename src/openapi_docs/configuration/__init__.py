"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    ConfigurationError,
    default_output_path,
    load_configuration,
    parse_render_settings,
    parse_theme,
)
from .runtime_settings import DEFAULT_THEME, Configuration, RenderSettings, Theme

__all__ = [
    "Configuration",
    "RenderSettings",
    "Theme",
    "DEFAULT_THEME",
    "ConfigurationError",
    "default_output_path",
    "load_configuration",
    "parse_render_settings",
    "parse_theme",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
