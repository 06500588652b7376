"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from openapi_docs.api_document.document_models import JSON_MEDIA_TYPE
from openapi_docs.render_registry.node_types import NodeType

from .runtime_settings import DEFAULT_THEME, Configuration, RenderSettings, Theme


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    source_value = _require_non_empty_string(parsed.get("source"), "source")
    source_path = _resolve_path(base_path, source_value)
    output_value = _optional_string(parsed.get("output"), "output")
    output_path = (
        _resolve_path(base_path, output_value)
        if output_value
        else default_output_path(source_path)
    )

    return Configuration(
        path=path,
        source_path=source_path,
        output_path=output_path,
        render=parse_render_settings(parsed),
    )


def parse_render_settings(section: Mapping[str, Any]) -> RenderSettings:
    """Validate the rendering keys of a configuration mapping."""
    theme = parse_theme(section.get("theme", DEFAULT_THEME.value))
    content_type = _require_non_empty_string(
        section.get("content_type", JSON_MEDIA_TYPE), "content_type"
    )
    overrides = _parse_overrides_section(section.get("overrides"))
    return RenderSettings(theme=theme, content_type=content_type, overrides=overrides)


def parse_theme(value: Any) -> Theme:
    """Return the theme named by `value`."""
    name = _require_non_empty_string(value, "theme").lower()
    try:
        return Theme(name)
    except ValueError as exc:
        allowed = ", ".join(theme.value for theme in Theme)
        raise ConfigurationError(f"theme must be one of: {allowed}.") from exc


def default_output_path(source_path: Path) -> Path:
    """Return the HTML output path used when none is configured."""
    return source_path.with_suffix(".html")


def _parse_overrides_section(value: Any) -> dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError("overrides must be a mapping of node type to import string.")
    known = {node_type.value for node_type in NodeType}
    overrides: dict[str, str] = {}
    for tag, import_string in value.items():
        if tag not in known:
            raise ConfigurationError(
                f"overrides.{tag} is not a node type; expected one of: {', '.join(sorted(known))}."
            )
        target = _require_non_empty_string(import_string, f"overrides.{tag}")
        if ":" not in target:
            raise ConfigurationError(
                f"overrides.{tag} must use the form 'package.module:function'."
            )
        overrides[tag] = target
    return overrides


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
