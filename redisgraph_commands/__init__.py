# SPDX-License-Identifier: Apache-2.0
"""
redisgraph-commands: graph query commands for redis-py connections.

    import redis.asyncio as redis
    from redisgraph_commands import graph_query

    con = redis.from_url("redis://127.0.0.1/")
    res = await graph_query(con, "my_graph", "MATCH (r:Rider) RETURN r.name")

The blocking variants live in ``redisgraph_commands.graph.commands``.
"""

from .graph.async_commands import (
    GRAPH_QUERY,
    GRAPH_RO_QUERY,
    AsyncGraphCommands,
    graph_query,
    graph_ro_query,
)
from .graph.client import AsyncGraphRedis, GraphRedis, connect, connect_sync
from .graph.command import AsyncConnectionLike, Cmd, ConnectionLike, cmd, encode_arg
from .graph.commands import GraphCommands
from .graph.errors import (
    ArgumentEncodingError,
    GraphCommandError,
    ReplyDecodeError,
    fault_kind,
)
from .graph.graph_types import GraphResultSet, parse_graph_reply

__version__ = "0.1.0"

__all__ = [
    "GRAPH_QUERY",
    "GRAPH_RO_QUERY",
    "AsyncConnectionLike",
    "ConnectionLike",
    "AsyncGraphCommands",
    "GraphCommands",
    "AsyncGraphRedis",
    "GraphRedis",
    "Cmd",
    "cmd",
    "encode_arg",
    "connect",
    "connect_sync",
    "graph_query",
    "graph_ro_query",
    "GraphResultSet",
    "parse_graph_reply",
    "GraphCommandError",
    "ArgumentEncodingError",
    "ReplyDecodeError",
    "fault_kind",
]
