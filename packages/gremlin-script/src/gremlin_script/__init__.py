"""
Построитель и кодировщик Gremlin-скриптов.

Обход собирается цепочкой функций из :mod:`gremlin_script.steps` и
кодируется в текст через :func:`encode`. Исполнение скрипта и работа с
соединениями остаются на стороне внешнего клиента.
"""

from .document import TraversalDocument, build_traversal
from .encoder import encode, escape, format_argument
from .exceptions import GremlinScriptError, InvalidArgumentError, InvalidTraversalError
from .loader import load_traversal_document, render_document
from .settings import NamespaceSettings, get_settings
from .steps import STEPS, anonymous, append_step, g
from .traversal import (
    ANONYMOUS_MARKER,
    LIST,
    SET,
    SINGLE,
    Atom,
    EdgeRef,
    Step,
    Traversal,
    VertexRef,
)

__all__ = [
    "ANONYMOUS_MARKER",
    "LIST",
    "SET",
    "SINGLE",
    "STEPS",
    "Atom",
    "EdgeRef",
    "GremlinScriptError",
    "InvalidArgumentError",
    "InvalidTraversalError",
    "NamespaceSettings",
    "Step",
    "Traversal",
    "TraversalDocument",
    "VertexRef",
    "anonymous",
    "append_step",
    "build_traversal",
    "encode",
    "escape",
    "format_argument",
    "g",
    "get_settings",
    "load_traversal_document",
    "render_document",
]
