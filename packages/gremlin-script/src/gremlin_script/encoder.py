"""Кодирование обхода в текстовый Gremlin-скрипт."""

from __future__ import annotations

import logging
import re

from .exceptions import InvalidArgumentError, InvalidTraversalError
from .traversal import ANONYMOUS_MARKER, Argument, Atom, EdgeRef, Traversal, VertexRef

logger = logging.getLogger(__name__)

# Кавычка, перед которой нечётное число обратных слэшей, уже экранирована.
_UNESCAPED_QUOTE = re.compile(r"((\A|[^\\])(\\\\)*)'")


def encode(traversal: Traversal, source: str = "g") -> str:
    """Собирает скрипт из обхода.

    Args:
        traversal: Готовый обход.
        source: Идентификатор источника обхода, с которого начинается скрипт.

    Returns:
        str: Скрипт вида ``g.V(1).values('name')``.

    Raises:
        InvalidTraversalError: Если маркер ``__`` стоит не первым шагом.
    """

    if not isinstance(traversal, Traversal):
        raise InvalidArgumentError(f"Expected a traversal, got {type(traversal).__name__}")
    script = _encode(traversal, source, source)
    logger.debug("Encoded traversal steps=%d script_len=%d", len(traversal), len(script))
    return script


def _encode(traversal: Traversal, seed: str, source: str) -> str:
    acc = seed
    for index, step in enumerate(traversal.steps):
        if step.name == ANONYMOUS_MARKER:
            if index != 0:
                raise InvalidTraversalError(f"Not a valid traversal: '{ANONYMOUS_MARKER}' at position {index}")
            acc = ANONYMOUS_MARKER
            continue
        args = ", ".join(format_argument(arg, source) for arg in step.arguments)
        call = f"{step.name}({args})"
        acc = f"{acc}.{call}" if acc else call
    return acc


def _nested_seed(traversal: Traversal, source: str) -> str:
    first = traversal.first
    if first is not None and first.name == "V":
        return source
    return ""


def format_argument(argument: Argument, source: str = "g") -> str:
    """Форматирует один аргумент шага согласно его варианту."""

    if argument is None:
        return "none"
    if isinstance(argument, bool):
        return "true" if argument else "false"
    if isinstance(argument, VertexRef):
        return f"V({_format_id(argument.id)})"
    if isinstance(argument, EdgeRef):
        return f"E({_format_id(argument.id)})"
    if isinstance(argument, (int, float, Atom)):
        return str(argument)
    if isinstance(argument, Traversal):
        return _encode(argument, _nested_seed(argument, source), source)
    if isinstance(argument, str):
        return f"'{escape(argument)}'"
    raise InvalidArgumentError(f"Unsupported argument type: {type(argument).__name__}")


def _format_id(ref_id: int | float | str) -> str:
    if isinstance(ref_id, str):
        return f"'{escape(ref_id)}'"
    return str(ref_id)


def escape(text: str) -> str:
    """Экранирует одинарные кавычки, если они ещё не экранированы."""

    return _UNESCAPED_QUOTE.sub(r"\1\\'", text)
