"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from openapi_docs.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    Theme,
    default_output_path,
    load_configuration,
    parse_render_settings,
    parse_theme,
    write_placeholder_configuration,
)
from openapi_docs.render_execution import RenderExecutionError, RenderRequest, execute_render

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="openapi-docs")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity written to stderr",
)
def cli(log_level: str) -> None:
    """Render OpenAPI documents into HTML documentation."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML render configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML render configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON render configuration file",
)
@click.option(
    "--source",
    "source_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the API document (overrides the configured source)",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to the HTML file to write (overrides the configured output)",
)
@click.option(
    "--theme",
    required=False,
    type=click.Choice([theme.value for theme in Theme], case_sensitive=False),
    help="Renderer set to use (overrides the configured theme)",
)
@click.option(
    "--content-type",
    required=False,
    help="Media type whose schemas are rendered (overrides the configured content type)",
)
@click.option(
    "--override",
    "override_options",
    multiple=True,
    metavar="TAG=MODULE:FUNCTION",
    help="Replace one node renderer; may be repeated and wins over configured overrides",
)
def render(
    config_path: str | None,
    source_path: str | None,
    output_path: str | None,
    theme: str | None,
    content_type: str | None,
    override_options: tuple[str, ...],
) -> None:
    """Render an API document into an HTML page."""
    try:
        request = _build_render_request(
            config_path=config_path,
            source_path=source_path,
            output_path=output_path,
            theme=theme,
            content_type=content_type,
            override_options=override_options,
        )
        outcome = execute_render(request)
    except (ConfigurationError, RenderExecutionError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


def _build_render_request(
    *,
    config_path: str | None,
    source_path: str | None,
    output_path: str | None,
    theme: str | None,
    content_type: str | None,
    override_options: tuple[str, ...],
) -> RenderRequest:
    if config_path:
        configuration = load_configuration(config_path)
        settings = configuration.render
        configured_source: Path | None = configuration.source_path
        configured_output: Path | None = configuration.output_path
    else:
        settings = parse_render_settings({})
        configured_source = None
        configured_output = None

    if source_path:
        source = Path(source_path).resolve()
        # A source given on the command line also moves the default output.
        configured_output = None
    elif configured_source is not None:
        source = configured_source
    else:
        raise CliError("An API document is required: pass --source or --config.")

    if output_path:
        output = Path(output_path).resolve()
    else:
        output = configured_output or default_output_path(source)

    overrides = dict(settings.overrides)
    overrides.update(_parse_override_options(override_options))
    return RenderRequest(
        source_path=source,
        output_path=output,
        theme=parse_theme(theme) if theme else settings.theme,
        content_type=content_type.strip() if content_type else settings.content_type,
        overrides=overrides,
    )


def _parse_override_options(override_options: tuple[str, ...]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for value in override_options:
        tag, separator, target = value.partition("=")
        if not separator or not tag.strip() or not target.strip():
            raise CliError(f"Invalid --override value {value!r}; expected TAG=MODULE:FUNCTION.")
        overrides[tag.strip()] = target.strip()
    return overrides


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
