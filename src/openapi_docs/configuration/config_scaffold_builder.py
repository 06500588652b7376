"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-docs.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Render configuration template for openapi-docs.
# Replace every <REQUIRED> placeholder before running render.
# Relative paths are resolved against the directory of this file.

# API document to render (.json, .yaml or .yml).
source: "<REQUIRED>"

# HTML file to write. Defaults to the source path with an .html suffix.
# output: "<OPTIONAL>"

# Renderer set: plain (bare markup) or docs (styled documentation page).
theme: docs

# Media type whose schema is shown for request bodies and responses.
content_type: application/json

# Replace individual node renderers with your own functions.
# Keys are node types: Document, Operations, Operation, RequestBody,
# Responses, Response, Schema, Property.
# overrides:
#   Property: "<OPTIONAL package.module:function>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML render configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder render configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
