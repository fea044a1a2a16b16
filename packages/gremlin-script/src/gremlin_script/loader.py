"""Загрузчик декларативных описаний обходов."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml

from .document import TraversalDocument, build_traversal
from .encoder import encode

logger = logging.getLogger(__name__)


@lru_cache
def load_traversal_document(path: str | Path) -> TraversalDocument:
    """Считывает и валидирует файл с описанием обхода.

    JSON является подмножеством YAML, поэтому читаются оба формата.

    Args:
        path: Путь до YAML/JSON-файла.

    Returns:
        TraversalDocument: Валидационная модель обхода.

    Raises:
        FileNotFoundError: Если файл отсутствует.
        ValueError: Если корень документа не mapping.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Traversal document not found: {file_path}")

    raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Traversal document root must be a mapping")

    document = TraversalDocument.model_validate(raw)
    logger.debug("Loaded traversal document path=%s steps=%d", file_path, len(document.steps))
    return document


def render_document(document: TraversalDocument, source: str | None = None) -> str:
    """Кодирует документ в скрипт; ``source`` переопределяет источник документа."""

    return encode(build_traversal(document), source or document.source)
