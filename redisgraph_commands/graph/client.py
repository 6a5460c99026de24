# redisgraph_commands/graph/client.py
# SPDX-License-Identifier: Apache-2.0
"""
redis-py clients with graph commands attached.

    from redisgraph_commands import connect

    async with connect("redis://localhost:6379/0") as con:
        res = await con.graph_query("my_graph", "MATCH (t:Team) RETURN t.name")

Both clients register ``parse_graph_reply`` for GRAPH.QUERY and
GRAPH.RO_QUERY, so replies are decoded by the client itself, including
when the commands go through ``execute_command`` directly.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

import redis
import redis.asyncio

from .async_commands import GRAPH_QUERY, GRAPH_RO_QUERY, AsyncGraphCommands
from .commands import GraphCommands
from .graph_types import parse_graph_reply

LOG = logging.getLogger(__name__)

URL_ENV = "REDISGRAPH_URL"
DEFAULT_URL = "redis://localhost:6379/0"


def _register_graph_callbacks(client: Any) -> None:
    for command in (GRAPH_QUERY, GRAPH_RO_QUERY):
        client.set_response_callback(command, parse_graph_reply)


class AsyncGraphRedis(AsyncGraphCommands, redis.asyncio.Redis):
    """``redis.asyncio.Redis`` with graph commands and reply decoding."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        _register_graph_callbacks(self)


class GraphRedis(GraphCommands, redis.Redis):
    """``redis.Redis`` with graph commands and reply decoding."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        _register_graph_callbacks(self)


def resolve_url(url: Optional[str] = None) -> str:
    """Explicit url, else $REDISGRAPH_URL, else the local default."""
    return url or os.getenv(URL_ENV) or DEFAULT_URL


def connect(url: Optional[str] = None, **kwargs: Any) -> AsyncGraphRedis:
    """
    Build an asyncio graph client. No I/O happens until the first command.

    Extra keyword arguments (``socket_timeout``, ``password``, ...) are
    passed to redis-py unchanged.
    """
    resolved = resolve_url(url)
    LOG.debug("creating async graph client (url from %s)", "argument" if url else URL_ENV)
    return AsyncGraphRedis.from_url(resolved, **kwargs)


def connect_sync(url: Optional[str] = None, **kwargs: Any) -> GraphRedis:
    """Blocking counterpart of connect."""
    resolved = resolve_url(url)
    LOG.debug("creating graph client (url from %s)", "argument" if url else URL_ENV)
    return GraphRedis.from_url(resolved, **kwargs)


__all__ = [
    "URL_ENV",
    "DEFAULT_URL",
    "AsyncGraphRedis",
    "GraphRedis",
    "resolve_url",
    "connect",
    "connect_sync",
]
