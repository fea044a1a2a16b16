"""Декларативное описание обхода (YAML/JSON) и его сборка в Traversal."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .steps import anonymous, append_step, g, resolve_step_name
from .traversal import Argument, Atom, EdgeRef, Traversal, VertexRef


class VertexArgument(BaseModel):
    """Ссылка на вершину: ``{vertex: 1}``."""

    model_config = ConfigDict(extra="forbid")

    vertex: Union[int, float, str]


class EdgeArgument(BaseModel):
    """Ссылка на ребро: ``{edge: "e1"}``."""

    model_config = ConfigDict(extra="forbid")

    edge: Union[int, float, str]


class AtomArgument(BaseModel):
    """Символьный токен без кавычек: ``{atom: single}``."""

    model_config = ConfigDict(extra="forbid")

    atom: str = Field(..., pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")


class NestedArgument(BaseModel):
    """Вложенный обход: ``{traversal: {anonymous: true, steps: [...]}}``."""

    model_config = ConfigDict(extra="forbid")

    traversal: TraversalDocument


ArgumentDocument = Union[None, bool, int, float, str, VertexArgument, EdgeArgument, AtomArgument, NestedArgument]


class StepDocument(BaseModel):
    """Один шаг: имя Gremlin (``addV``) или имя функции построителя (``add_v``)."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    args: Union[list[ArgumentDocument], ArgumentDocument] = Field(default_factory=list)


class TraversalDocument(BaseModel):
    """Корневое описание обхода."""

    model_config = ConfigDict(extra="forbid")

    source: str = Field("g", min_length=1)
    anonymous: bool = False
    steps: list[StepDocument] = Field(default_factory=list)


NestedArgument.model_rebuild()
StepDocument.model_rebuild()
TraversalDocument.model_rebuild()


def build_traversal(document: TraversalDocument) -> Traversal:
    """Собирает Traversal из провалидированного документа."""

    graph = anonymous() if document.anonymous else g()
    for step in document.steps:
        raw_args = step.args if isinstance(step.args, list) else [step.args]
        graph = append_step(graph, resolve_step_name(step.name), [_build_argument(arg) for arg in raw_args])
    return graph


def _build_argument(arg: ArgumentDocument) -> Argument:
    if isinstance(arg, VertexArgument):
        return VertexRef(arg.vertex)
    if isinstance(arg, EdgeArgument):
        return EdgeRef(arg.edge)
    if isinstance(arg, AtomArgument):
        return Atom(arg.atom)
    if isinstance(arg, NestedArgument):
        return build_traversal(arg.traversal)
    return arg
