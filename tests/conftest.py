"""Shared pytest fixtures."""

from __future__ import annotations

import logging

import pytest

from bindkit.core.coercion import CoercionRegistry, build_default_registry
from bindkit.core.types import TypeResolver
from bindkit.markup.extension import ProvideValueTarget, ServiceContainer
from bindkit.utils import logging as logging_utils

_ENV_VARS = (
    "BINDKIT_ABSENT_STRING",
    "BINDKIT_LOG_LEVEL",
    "BINDKIT_DEBUG_LOGGING",
    "BINDKIT_CASE_INSENSITIVE_ENUMS",
    "BINDKIT_LOG_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry() -> CoercionRegistry:
    return build_default_registry()


@pytest.fixture
def services() -> ServiceContainer:
    container = ServiceContainer()
    container.add_service(TypeResolver, TypeResolver())
    container.add_service(ProvideValueTarget, ProvideValueTarget(object(), "visible"))
    return container


@pytest.fixture
def _restore_logging(monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    monkeypatch.setattr(logging_utils, "_LOG_PATH", None)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.captureWarnings(False)
