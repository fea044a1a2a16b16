"""Pytest bootstrap: добавляет локальные src-пакеты в `sys.path`.

Файл нужен для локального запуска тестов без установки пакета в окружение.
Он модифицирует `sys.path`, указывая на каталоги вида `packages/*/src`,
чтобы импорт `gremlin_script` разрешался.
"""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Iterable


def _extend_sys_path(paths: Iterable[Path]) -> None:
    """Добавляет директории в начало `sys.path`, пропуская уже добавленные.

    Args:
        paths: Итерация путей, которые нужно добавить.
    """

    for p in paths:
        str_path = str(p)
        if str_path not in sys.path:
            sys.path.insert(0, str_path)


def _collect_src_paths(root: Path) -> list[Path]:
    """Собирает пути к локальным src-каталогам пакетов.

    Args:
        root: Корень репозитория.

    Returns:
        Список путей к src-каталогам.
    """

    candidates: list[Path] = [
        root / "packages" / "gremlin-script" / "src",
    ]
    return [p for p in candidates if p.exists()]


# Выполняется при импортировании conftest
_extend_sys_path(_collect_src_paths(Path(__file__).parent.resolve()))
