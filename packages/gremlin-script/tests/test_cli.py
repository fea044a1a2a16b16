from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from gremlin_script.cli import app
from gremlin_script.loader import load_traversal_document


@pytest.fixture(autouse=True)
def reset_cache() -> Iterator[None]:
    load_traversal_document.cache_clear()
    yield
    load_traversal_document.cache_clear()


def test_cli_render(tmp_path: Path) -> None:
    doc_path = tmp_path / "traversal.json"
    doc_path.write_text(
        '{"steps": [{"name": "V", "args": 1}, {"name": "has", "args": ["k", "it\'s"]}]}',
        encoding="utf-8",
    )

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(doc_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "g.V(1).has('k', 'it\\'s')"


def test_cli_render_with_source(tmp_path: Path) -> None:
    doc_path = tmp_path / "traversal.yaml"
    doc_path.write_text("steps:\n  - name: V\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(doc_path), "--source", "t"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "t.V()"


def test_cli_render_invalid_traversal(tmp_path: Path) -> None:
    doc_path = tmp_path / "broken.yaml"
    doc_path.write_text("steps:\n  - name: V\n  - name: __\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(doc_path)])

    assert result.exit_code == 1


def test_cli_render_missing_file(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1


def test_cli_steps() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["steps"])

    assert result.exit_code == 0
    assert "add_v -> addV" in result.stdout
    assert "in_ -> in" in result.stdout


def test_cli_render_malformed_yaml(tmp_path: Path) -> None:
    doc_path = tmp_path / "malformed.yaml"
    doc_path.write_text("steps: [\n  - name: V\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["render", str(doc_path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
