"""CLI для сборки Gremlin-скриптов из декларативных описаний."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
import yaml

from .exceptions import GremlinScriptError
from .loader import load_traversal_document, render_document
from .steps import STEPS

logger = logging.getLogger(__name__)

app = typer.Typer(help="Инструменты сборки Gremlin-скриптов.")


@app.callback()
def main_callback() -> None:
    """Корневой callback, требующий указания команды."""


@app.command(name="render")
def render(
    path: Path = typer.Argument(..., help="YAML/JSON-файл с описанием обхода."),
    source: str | None = typer.Option(
        None,
        "--source",
        help="Идентификатор источника обхода (по умолчанию из документа, обычно g).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Подробный лог."),
) -> None:
    """Кодирует обход из файла и выводит скрипт в stdout."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s - %(message)s",
    )
    try:
        document = load_traversal_document(path)
        script = render_document(document, source)
    except (GremlinScriptError, OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("Не удалось собрать скрипт из %s: %s", path, exc)
        raise typer.Exit(code=1) from exc

    typer.echo(script)


@app.command(name="steps")
def steps() -> None:
    """Выводит таблицу шагов: имя функции построителя -> имя шага Gremlin."""

    for python_name, gremlin_name in STEPS.items():
        typer.echo(f"{python_name} -> {gremlin_name}")


def main() -> None:
    """Точка входа для python -m gremlin_script.cli."""

    app()


if __name__ == "__main__":  # pragma: no cover - ручной запуск
    main()
