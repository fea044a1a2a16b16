from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from pydantic import ValidationError

from gremlin_script import (
    SINGLE,
    InvalidTraversalError,
    TraversalDocument,
    VertexRef,
    build_traversal,
    load_traversal_document,
    render_document,
)


@pytest.fixture(autouse=True)
def reset_cache() -> Iterator[None]:
    load_traversal_document.cache_clear()
    yield
    load_traversal_document.cache_clear()


def test_load_traversal_document(tmp_path: Path) -> None:
    doc_path = tmp_path / "friends.yaml"
    doc_path.write_text(
        """
steps:
  - name: V
    args: 1
  - name: repeat
    args:
      traversal:
        anonymous: true
        steps:
          - name: out
            args: knows
  - name: times
    args: 2
  - name: values
    args: [name, age]
""",
        encoding="utf-8",
    )

    document = load_traversal_document(doc_path)

    assert document.source == "g"
    assert len(document.steps) == 4
    assert render_document(document) == "g.V(1).repeat(__.out('knows')).times(2).values('name', 'age')"


def test_tagged_arguments_and_builder_names() -> None:
    document = TraversalDocument.model_validate(
        {
            "steps": [
                {"name": "add_v", "args": "person"},
                {"name": "property", "args": [{"atom": "single"}, "age", 29]},
                {"name": "add_e", "args": "knows"},
                {"name": "to", "args": {"vertex": 2}},
                {"name": "inject", "args": [None, True, 1.5, {"edge": "e1"}]},
            ]
        }
    )

    graph = build_traversal(document)

    assert graph.steps[1].arguments == (SINGLE, "age", 29)
    assert graph.steps[3].arguments == (VertexRef(2),)
    assert render_document(document) == (
        "g.addV('person').property(single, 'age', 29).addE('knows').to(V(2)).inject(none, true, 1.5, E('e1'))"
    )


def test_source_override() -> None:
    document = TraversalDocument.model_validate({"source": "h", "steps": [{"name": "V"}]})

    assert render_document(document) == "h.V()"
    assert render_document(document, "t") == "t.V()"


def test_misplaced_marker_in_document_fails() -> None:
    document = TraversalDocument.model_validate({"steps": [{"name": "V"}, {"name": "__"}]})

    with pytest.raises(InvalidTraversalError):
        render_document(document)


def test_missing_file_raises() -> None:
    with pytest.raises(FileNotFoundError):
        load_traversal_document("does-not-exist.yaml")


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    doc_path = tmp_path / "list.yaml"
    doc_path.write_text("- name: V\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_traversal_document(doc_path)


def test_unknown_tagged_argument_raises() -> None:
    with pytest.raises(ValidationError):
        TraversalDocument.model_validate({"steps": [{"name": "V", "args": {"node": 1}}]})


@pytest.mark.parametrize("atom", ["single, 'x', 1).drop().property(single", "x y", "", "1st"])
def test_atom_argument_must_be_identifier(atom: str) -> None:
    with pytest.raises(ValidationError):
        TraversalDocument.model_validate({"steps": [{"name": "property", "args": [{"atom": atom}, "k", 1]}]})
