from __future__ import annotations

from typing import Iterator

import pytest
from pydantic import ValidationError

from gremlin_script import encode, g
from gremlin_script.settings import NamespaceSettings, get_settings
from gremlin_script.steps import add_namespace, has_namespace


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("GREMLIN_SCRIPT_NAMESPACE_PROPERTY_KEY", raising=False)
    monkeypatch.delenv("GREMLIN_SCRIPT_NAMESPACE_VALUE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = get_settings()

    assert settings.namespace_property_key == "namespace"
    assert settings.namespace_value == "gremlin_script"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GREMLIN_SCRIPT_NAMESPACE_PROPERTY_KEY", "tenant")
    monkeypatch.setenv("GREMLIN_SCRIPT_NAMESPACE_VALUE", "acme")

    settings = get_settings()

    assert settings.namespace_property_key == "tenant"
    assert settings.namespace_value == "acme"
    assert encode(has_namespace(g())) == "g.has('tenant', 'acme')"
    assert encode(add_namespace(g(), "beta")) == "g.property('tenant', 'beta')"


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_settings()
    monkeypatch.setenv("GREMLIN_SCRIPT_NAMESPACE_VALUE", "changed")

    assert get_settings() is first


def test_empty_values_rejected() -> None:
    with pytest.raises(ValidationError):
        NamespaceSettings(namespace_property_key="")
