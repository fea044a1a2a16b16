"""Настройки namespace-хелперов построителя обходов."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAMESPACE_PROPERTY = "namespace"
DEFAULT_NAMESPACE = "gremlin_script"


class NamespaceSettings(BaseSettings):
    """Ключ свойства namespace и значение namespace по умолчанию."""

    namespace_property_key: str = Field(
        DEFAULT_NAMESPACE_PROPERTY,
        min_length=1,
        description="Ключ свойства, в котором хранится namespace",
    )
    namespace_value: str = Field(
        DEFAULT_NAMESPACE,
        min_length=1,
        description="Namespace, подставляемый хелперами по умолчанию",
    )

    model_config = SettingsConfigDict(env_prefix="GREMLIN_SCRIPT_", extra="ignore")


@lru_cache
def get_settings() -> NamespaceSettings:
    """Загружает настройки из окружения с кешированием.

    Returns:
        NamespaceSettings: Экземпляр настроек namespace.
    """

    return NamespaceSettings()
