"""
Построитель обходов: по одной функции на каждый шаг Gremlin.

Каждая функция принимает текущий обход и аргументы шага и возвращает новый
обход с добавленным в конец шагом. Запрос ``g.V(1).values('name')``
собирается так::

    values(v(g(), 1), "name")

Модуль ничего не исполняет, он только накапливает шаги. Текст скрипта
получается через :func:`gremlin_script.encoder.encode`.
"""

from __future__ import annotations

from typing import Any, Union, overload

from .exceptions import InvalidArgumentError
from .settings import NamespaceSettings, get_settings
from .traversal import (
    ANONYMOUS_MARKER,
    CARDINALITIES,
    Argument,
    Arguments,
    Atom,
    EdgeRef,
    Traversal,
    VertexRef,
    check_reference_id,
)


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Any = _Unset()


def _optional(value: Any) -> Arguments:
    return () if value is _UNSET else value


def g() -> Traversal:
    """Начало обхода: пустая последовательность шагов."""

    return Traversal()


def anonymous() -> Traversal:
    """Начало анонимного под-обхода (``__``) для вложения в другие шаги."""

    return Traversal().append(ANONYMOUS_MARKER)


def append_step(graph: Traversal, name: str, arguments: Arguments = ()) -> Traversal:
    """Добавляет произвольный шаг с аргументами в конец обхода.

    Args:
        graph: Текущий обход.
        name: Имя шага Gremlin (``addV``, ``out`` ...).
        arguments: Один аргумент или список аргументов; список берётся как есть.

    Returns:
        Traversal: Новый обход с добавленным шагом.

    Raises:
        InvalidArgumentError: Если ``graph`` не обход или аргумент недопустим.
    """

    if not isinstance(graph, Traversal):
        raise InvalidArgumentError(f"Expected a traversal, got {type(graph).__name__}")
    return graph.append(name, arguments)


def add_v(graph: Traversal, label: Argument) -> Traversal:
    return append_step(graph, "addV", [label])


def add_e(graph: Traversal, label: Argument) -> Traversal:
    return append_step(graph, "addE", [label])


def property(graph: Traversal, *args: Argument) -> Traversal:
    """Добавляет шаг ``property``.

    Допустимые формы: ``(key)``, ``(key, value)`` и
    ``(cardinality, key, value)``, где cardinality одна из ``SINGLE``,
    ``LIST``, ``SET``.
    """

    if not 1 <= len(args) <= 3:
        raise InvalidArgumentError(f"property takes 1 to 3 arguments, got {len(args)}")
    if len(args) == 3 and not (isinstance(args[0], Atom) and args[0] in CARDINALITIES):
        raise InvalidArgumentError(f"property cardinality must be single, list or set, got {args[0]!r}")
    return append_step(graph, "property", list(args))


def drop(graph: Traversal) -> Traversal:
    return append_step(graph, "drop")


def to(graph: Traversal, target: Argument) -> Traversal:
    return append_step(graph, "to", [target])


def from_(graph: Traversal, source: Argument) -> Traversal:
    return append_step(graph, "from", [source])


def add_namespace(
    graph: Traversal,
    ns: Argument = _UNSET,
    *,
    settings: NamespaceSettings | None = None,
) -> Traversal:
    """Помечает элемент свойством namespace (ключ берётся из настроек)."""

    cfg = settings or get_settings()
    value = cfg.namespace_value if ns is _UNSET else ns
    return property(graph, cfg.namespace_property_key, value)


def has_namespace(
    graph: Traversal,
    ns: Argument = _UNSET,
    *,
    settings: NamespaceSettings | None = None,
) -> Traversal:
    """Фильтрует элементы по свойству namespace."""

    cfg = settings or get_settings()
    value = cfg.namespace_value if ns is _UNSET else ns
    return has(graph, cfg.namespace_property_key, value)


ReferenceId = Union[int, float, str]


@overload
def v(graph: ReferenceId) -> VertexRef: ...


@overload
def v(graph: Traversal, ref: VertexRef | ReferenceId = ...) -> Traversal: ...


def v(graph: Traversal | ReferenceId, ref: Any = _UNSET) -> Traversal | VertexRef:
    """Выбор вершин (``V``) или создание ссылки на вершину.

    ``v(graph)`` добавляет ``V()``, ``v(graph, ref_or_id)`` добавляет
    ``V(id)``. Если первый аргумент не обход, возвращается
    :class:`VertexRef` для использования в качестве аргумента.
    """

    if not isinstance(graph, Traversal):
        if ref is not _UNSET:
            raise InvalidArgumentError("v expects a traversal as the first of two arguments")
        return VertexRef(graph)
    if ref is _UNSET:
        return append_step(graph, "V")
    if isinstance(ref, VertexRef):
        return append_step(graph, "V", [ref.id])
    return append_step(graph, "V", [check_reference_id("V", ref)])


@overload
def e(graph: ReferenceId) -> EdgeRef: ...


@overload
def e(graph: Traversal, ref: EdgeRef | ReferenceId = ...) -> Traversal: ...


def e(graph: Traversal | ReferenceId, ref: Any = _UNSET) -> Traversal | EdgeRef:
    """Выбор рёбер (``E``) или создание ссылки на ребро, аналогично :func:`v`."""

    if not isinstance(graph, Traversal):
        if ref is not _UNSET:
            raise InvalidArgumentError("e expects a traversal as the first of two arguments")
        return EdgeRef(graph)
    if ref is _UNSET:
        return append_step(graph, "E")
    if isinstance(ref, EdgeRef):
        return append_step(graph, "E", [ref.id])
    return append_step(graph, "E", [check_reference_id("E", ref)])


def out(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    """Переход к смежным вершинам по исходящим рёбрам с метками ``labels``."""

    return append_step(graph, "out", _optional(labels))


def in_(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "in", _optional(labels))


def both(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "both", _optional(labels))


def out_e(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "outE", _optional(labels))


def in_e(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "inE", _optional(labels))


def both_e(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "bothE", _optional(labels))


def out_v(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "outV", _optional(labels))


def in_v(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "inV", _optional(labels))


def both_v(graph: Traversal, labels: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "bothV", _optional(labels))


def has(graph: Traversal, key: Argument, value: Argument) -> Traversal:
    """Фильтр по значению свойства ``key``."""

    return append_step(graph, "has", [key, value])


def has_label(graph: Traversal, label: Argument) -> Traversal:
    return append_step(graph, "hasLabel", [label])


def has_key(graph: Traversal, keys: Arguments) -> Traversal:
    return append_step(graph, "hasKey", keys)


def is_(graph: Traversal, value: Argument) -> Traversal:
    return append_step(graph, "is", [value])


def eq(graph: Traversal, value: Argument) -> Traversal:
    return append_step(graph, "eq", [value])


def where(graph: Traversal, traversal: Argument) -> Traversal:
    return append_step(graph, "where", [traversal])


def not_(graph: Traversal, traversal: Argument) -> Traversal:
    return append_step(graph, "not", [traversal])


def and_(graph: Traversal, traversals: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "and", _optional(traversals))


def or_(graph: Traversal, traversals: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "or", _optional(traversals))


def coin(graph: Traversal, probability: float) -> Traversal:
    """Случайный фильтр с вероятностью прохождения ``probability``."""

    return append_step(graph, "coin", probability)


def dedup(graph: Traversal) -> Traversal:
    return append_step(graph, "dedup")


def simple_path(graph: Traversal) -> Traversal:
    return append_step(graph, "simplePath")


def cyclic_path(graph: Traversal) -> Traversal:
    return append_step(graph, "cyclicPath")


def tail(graph: Traversal, size: int = 1) -> Traversal:
    return append_step(graph, "tail", [size])


def values(graph: Traversal, keys: Arguments) -> Traversal:
    """Значения свойств по одному ключу или списку ключей."""

    return append_step(graph, "values", keys)


def value_map(graph: Traversal, keys: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "valueMap", _optional(keys))


def properties(graph: Traversal, keys: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "properties", _optional(keys))


def key(graph: Traversal) -> Traversal:
    return append_step(graph, "key")


def id_(graph: Traversal) -> Traversal:
    return append_step(graph, "id")


def identity(graph: Traversal) -> Traversal:
    return append_step(graph, "identity")


def constant(graph: Traversal, value: Arguments) -> Traversal:
    return append_step(graph, "constant", value)


def path(graph: Traversal) -> Traversal:
    return append_step(graph, "path")


def as_(graph: Traversal, labels: Arguments) -> Traversal:
    return append_step(graph, "as", labels)


def select(graph: Traversal, keys: Arguments) -> Traversal:
    return append_step(graph, "select", keys)


def by(graph: Traversal, modulators: Arguments) -> Traversal:
    return append_step(graph, "by", modulators)


def coalesce(graph: Traversal, traversals: Arguments) -> Traversal:
    """Возвращает результат первого непустого из вложенных обходов."""

    return append_step(graph, "coalesce", traversals)


def inject(graph: Traversal, value: Argument) -> Traversal:
    return append_step(graph, "inject", [value])


def count(graph: Traversal) -> Traversal:
    return append_step(graph, "count")


def sum_(graph: Traversal) -> Traversal:
    return append_step(graph, "sum")


def min_(graph: Traversal) -> Traversal:
    return append_step(graph, "min")


def max_(graph: Traversal) -> Traversal:
    return append_step(graph, "max")


def group(graph: Traversal) -> Traversal:
    return append_step(graph, "group")


def group_count(graph: Traversal, key: Arguments = _UNSET) -> Traversal:
    """Добавляет ``groupCount``; ``key`` задаёт side-effect ключ группировки."""

    return append_step(graph, "groupCount", _optional(key))


def fold(graph: Traversal, traversal: Argument = _UNSET) -> Traversal:
    return append_step(graph, "fold", () if traversal is _UNSET else [traversal])


def unfold(graph: Traversal, traversal: Argument = _UNSET) -> Traversal:
    return append_step(graph, "unfold", () if traversal is _UNSET else [traversal])


def aggregate(graph: Traversal, key: Arguments) -> Traversal:
    return append_step(graph, "aggregate", key)


def store(graph: Traversal, key: Arguments) -> Traversal:
    """Добавляет ``store`` с ключом side-effect, в котором копится агрегат."""

    return append_step(graph, "store", key)


def barrier(graph: Traversal, max_barrier_size: Arguments = _UNSET) -> Traversal:
    return append_step(graph, "barrier", _optional(max_barrier_size))


def repeat(graph: Traversal, traversal: Argument) -> Traversal:
    """Повторяет вложенный обход; обычно дополняется ``until`` или ``times``."""

    return append_step(graph, "repeat", [traversal])


def until(graph: Traversal, traversal: Argument) -> Traversal:
    return append_step(graph, "until", [traversal])


def loops(graph: Traversal) -> Traversal:
    return append_step(graph, "loops")


def has_next(graph: Traversal) -> Traversal:
    return append_step(graph, "hasNext")


def next(graph: Traversal, amount: Argument = _UNSET) -> Traversal:
    return append_step(graph, "next", () if amount is _UNSET else [amount])


def try_next(graph: Traversal) -> Traversal:
    return append_step(graph, "tryNext")


def to_list(graph: Traversal) -> Traversal:
    return append_step(graph, "toList")


def to_set(graph: Traversal) -> Traversal:
    return append_step(graph, "toSet")


def to_bulk_set(graph: Traversal) -> Traversal:
    return append_step(graph, "toBulkSet")


def iterate(graph: Traversal) -> Traversal:
    return append_step(graph, "iterate")


# Имя функции построителя -> имя шага Gremlin.
STEPS: dict[str, str] = {
    "add_v": "addV",
    "add_e": "addE",
    "property": "property",
    "drop": "drop",
    "to": "to",
    "from_": "from",
    "v": "V",
    "e": "E",
    "out": "out",
    "in_": "in",
    "both": "both",
    "out_e": "outE",
    "in_e": "inE",
    "both_e": "bothE",
    "out_v": "outV",
    "in_v": "inV",
    "both_v": "bothV",
    "has": "has",
    "has_label": "hasLabel",
    "has_key": "hasKey",
    "is_": "is",
    "eq": "eq",
    "where": "where",
    "not_": "not",
    "and_": "and",
    "or_": "or",
    "coin": "coin",
    "dedup": "dedup",
    "simple_path": "simplePath",
    "cyclic_path": "cyclicPath",
    "tail": "tail",
    "values": "values",
    "value_map": "valueMap",
    "properties": "properties",
    "key": "key",
    "id_": "id",
    "identity": "identity",
    "constant": "constant",
    "path": "path",
    "as_": "as",
    "select": "select",
    "by": "by",
    "coalesce": "coalesce",
    "inject": "inject",
    "count": "count",
    "sum_": "sum",
    "min_": "min",
    "max_": "max",
    "group": "group",
    "group_count": "groupCount",
    "fold": "fold",
    "unfold": "unfold",
    "aggregate": "aggregate",
    "store": "store",
    "barrier": "barrier",
    "repeat": "repeat",
    "until": "until",
    "loops": "loops",
    "has_next": "hasNext",
    "next": "next",
    "try_next": "tryNext",
    "to_list": "toList",
    "to_set": "toSet",
    "to_bulk_set": "toBulkSet",
    "iterate": "iterate",
}


def resolve_step_name(name: str) -> str:
    """Возвращает имя шага Gremlin для имени функции построителя (или само имя)."""

    return STEPS.get(name, name)
