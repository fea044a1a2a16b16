"""
Модель данных обхода: шаги, аргументы и ссылки на вершины/рёбра.

Traversal: неизменяемая упорядоченная последовательность шагов. Каждый
вызов ``append`` возвращает новый объект, исходный остаётся прежним, поэтому
один и тот же обход можно безопасно кодировать повторно и из разных потоков.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Sequence, Union

from .exceptions import InvalidArgumentError

ANONYMOUS_MARKER = "__"


@dataclass(frozen=True)
class Atom:
    """Символьный токен, выводится без кавычек (например, ``single``)."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise InvalidArgumentError(f"Atom must be a bare identifier, got {self.name!r}")

    def __str__(self) -> str:
        return self.name


SINGLE = Atom("single")
LIST = Atom("list")
SET = Atom("set")
CARDINALITIES = frozenset({SINGLE, LIST, SET})


def check_reference_id(kind: str, ref_id: object) -> int | float | str:
    if isinstance(ref_id, bool) or not isinstance(ref_id, (int, float, str)):
        raise InvalidArgumentError(f"{kind} id must be a number or a string, got {type(ref_id).__name__}")
    return ref_id  # type: ignore[return-value]


@dataclass(frozen=True)
class VertexRef:
    id: int | float | str
    label: str = ""

    def __post_init__(self) -> None:
        check_reference_id("Vertex", self.id)


@dataclass(frozen=True)
class EdgeRef:
    id: int | float | str
    label: str = ""

    def __post_init__(self) -> None:
        check_reference_id("Edge", self.id)


Argument = Union[None, bool, int, float, str, Atom, VertexRef, EdgeRef, "Traversal"]
Arguments = Union[Argument, Sequence[Argument]]


def validate_argument(argument: object) -> Argument:
    """Проверяет, что значение относится к закрытому набору вариантов аргумента."""

    if argument is None or isinstance(argument, (bool, int, float, str, Atom, VertexRef, EdgeRef, Traversal)):
        return argument  # type: ignore[return-value]
    raise InvalidArgumentError(f"Unsupported argument type: {type(argument).__name__}")


def normalize_arguments(value: Arguments) -> tuple[Argument, ...]:
    """Список или кортеж используется как есть, одиночное значение оборачивается."""

    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True)
class Step:
    name: str
    arguments: tuple[Argument, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError("Step name must be a non-empty string")
        arguments = tuple(validate_argument(arg) for arg in normalize_arguments(self.arguments))
        object.__setattr__(self, "arguments", arguments)


@dataclass(frozen=True)
class Traversal:
    """Упорядоченная FIFO-последовательность шагов."""

    steps: tuple[Step, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        steps = tuple(self.steps)
        for step in steps:
            if not isinstance(step, Step):
                raise InvalidArgumentError(f"Traversal accepts only steps, got {type(step).__name__}")
        object.__setattr__(self, "steps", steps)

    def append(self, name: str, arguments: Arguments = ()) -> Traversal:
        step = Step(name, normalize_arguments(arguments))
        return Traversal(self.steps + (step,))

    @property
    def first(self) -> Step | None:
        return self.steps[0] if self.steps else None

    @property
    def is_anonymous(self) -> bool:
        return self.first is not None and self.first.name == ANONYMOUS_MARKER

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)
