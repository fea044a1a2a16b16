"""Исключения пакета gremlin_script."""

from __future__ import annotations


class GremlinScriptError(RuntimeError):
    """Базовая ошибка построения или кодирования обхода."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause


class InvalidTraversalError(GremlinScriptError):
    """Обход собран некорректно (маркер ``__`` не на первой позиции)."""


class InvalidArgumentError(GremlinScriptError, TypeError):
    """Аргумент шага не входит в допустимый набор вариантов."""
