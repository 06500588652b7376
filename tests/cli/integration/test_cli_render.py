"""CLI render integration tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from click.testing import CliRunner
from openapi_docs.cli import cli

_SAMPLES_DIR = Path(__file__).resolve().parents[3] / "samples"


def _copy_sample(tmp_path: Path) -> Path:
    destination = tmp_path / "petstore.json"
    shutil.copyfile(_SAMPLES_DIR / "petstore.json", destination)
    return destination


def _write_override_module(tmp_path: Path, monkeypatch) -> str:
    module_path = tmp_path / "shouty_renderers.py"
    module_path.write_text(
        "from openapi_docs.markup import element\n"
        "\n"
        "\n"
        "def render_property(props, context):\n"
        "    return element('em', props.name.upper())\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    return "shouty_renderers:render_property"


def test_render_command_writes_default_output_next_to_source(tmp_path: Path) -> None:
    runner = CliRunner()
    source = _copy_sample(tmp_path)

    result = runner.invoke(cli, ["render", "--source", str(source), "--theme", "plain"])

    output_path = (tmp_path / "petstore.html").resolve()
    assert result.exit_code == 0
    assert str(output_path) in result.output
    html = output_path.read_text(encoding="utf-8")
    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Swagger Petstore</title>" in html
    assert "cdn.tailwindcss.com" not in html


def test_render_command_uses_configuration_file(tmp_path: Path) -> None:
    runner = CliRunner()
    _copy_sample(tmp_path)
    config_path = tmp_path / "openapi-docs.json"
    config_path.write_text(
        json.dumps(
            {"source": "petstore.json", "output": "site/index.html", "theme": "docs"}
        ),
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["render", "--config", str(config_path)])

    assert result.exit_code == 0
    html = (tmp_path / "site" / "index.html").read_text(encoding="utf-8")
    assert "https://cdn.tailwindcss.com" in html
    assert "<p>Example:</p>" in html


def test_command_line_options_win_over_configuration(tmp_path: Path, monkeypatch) -> None:
    runner = CliRunner()
    _copy_sample(tmp_path)
    override = _write_override_module(tmp_path, monkeypatch)
    config_path = tmp_path / "openapi-docs.yaml"
    config_path.write_text(
        'source: "petstore.json"\n'
        "theme: docs\n"
        "overrides:\n"
        '  Property: "openapi_docs.node_rendering.default_renderers:render_property"\n',
        encoding="utf-8",
    )
    output_path = tmp_path / "out" / "plain.html"

    result = runner.invoke(
        cli,
        [
            "render",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
            "--theme",
            "plain",
            "--override",
            f"Property={override}",
        ],
    )

    assert result.exit_code == 0
    html = output_path.read_text(encoding="utf-8")
    assert "cdn.tailwindcss.com" not in html
    assert "<em>NAME</em>" in html
    assert "property-name" not in html
    assert not (tmp_path / "petstore.html").exists()


def test_render_command_reports_configuration_errors(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = tmp_path / "openapi-docs.yaml"
    config_path.write_text('source: "petstore.json"\ntheme: fancy\n', encoding="utf-8")

    result = runner.invoke(cli, ["render", "--config", str(config_path)])

    assert result.exit_code != 0
    assert "theme must be one of" in str(result.exception)


def test_generate_config_command_writes_placeholder_file_with_default_name(
    tmp_path: Path,
) -> None:
    runner = CliRunner()
    with runner.isolated_filesystem(temp_dir=str(tmp_path)):
        result = runner.invoke(cli, ["generate-config"])
        output_path = Path("openapi-docs.yaml").resolve()

        assert result.exit_code == 0
        assert output_path.exists()
        content = output_path.read_text(encoding="utf-8")
        assert "source:" in content
        assert "<REQUIRED>" in content
        assert str(output_path) in result.output


def test_generate_config_command_fails_when_output_file_already_exists(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "openapi-docs.yaml"
    output_path.write_text("already-there", encoding="utf-8")

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code != 0
    assert "already exists" in str(result.exception).lower()
    assert output_path.read_text(encoding="utf-8") == "already-there"
