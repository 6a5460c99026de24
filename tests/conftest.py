# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures for the graph command suite.

The async connection class under test is pluggable:

    REDISGRAPH_CONNECTION="package.module:ClassName" pytest

It must be constructible without arguments and accept the mock keyword
arguments used by the suite (``default_reply``, ``exclusive``,
``latency_s``), which in practice means a MockAsyncConnection subclass.
By default the suite runs against both the plain mock and the mock with
the AsyncGraphCommands mixin.
"""

from __future__ import annotations

import importlib
import inspect
import os
from typing import List, Optional

import pytest

from redisgraph_commands.mock.mock_connection import (
    EMPTY_RESULT_REPLY,
    MockAsyncConnection,
    MockConnection,
)

CONNECTION_ENV = "REDISGRAPH_CONNECTION"
DEFAULT_CONNECTIONS = [
    "redisgraph_commands.mock.mock_connection:MockAsyncConnection",
    "redisgraph_commands.mock.mock_connection:MockAsyncGraphConnection",
]


class ConnectionSpecError(RuntimeError):
    """Raised when REDISGRAPH_CONNECTION does not resolve to a usable class."""


def _load_class_from_spec(spec: str) -> type:
    """Load a class from a 'package.module:ClassName' string."""
    module_name, _, class_name = spec.partition(":")
    if not module_name or not class_name:
        raise ConnectionSpecError(
            f"Invalid connection spec '{spec}'. Expected 'package.module:ClassName'."
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConnectionSpecError(
            f"Failed to import connection module '{module_name}' for spec '{spec}'."
        ) from exc

    cls = getattr(module, class_name, None)
    if cls is None:
        raise ConnectionSpecError(
            f"Connection class '{class_name}' not found in module '{module_name}'."
        )
    if not inspect.isclass(cls):
        raise ConnectionSpecError(f"Connection spec '{spec}' must resolve to a class.")
    return cls


def _connection_specs() -> List[str]:
    override: Optional[str] = os.getenv(CONNECTION_ENV)
    return [override] if override else list(DEFAULT_CONNECTIONS)


@pytest.fixture(params=_connection_specs())
def connection_cls(request) -> type:
    return _load_class_from_spec(request.param)


@pytest.fixture
def connection(connection_cls) -> MockAsyncConnection:
    """Exclusive async connection answering unscripted commands with an empty result."""
    return connection_cls(default_reply=EMPTY_RESULT_REPLY)


@pytest.fixture
def sync_connection() -> MockConnection:
    return MockConnection(default_reply=EMPTY_RESULT_REPLY)


def pytest_configure(config: pytest.Config) -> None:
    markers = [
        "shape: emitted command shape",
        "concurrency: pending-operation, exclusivity and cancellation behavior",
        "errors: fault pass-through and classification",
        "decoding: result set decoding",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
