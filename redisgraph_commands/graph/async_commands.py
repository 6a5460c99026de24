# redisgraph_commands/graph/async_commands.py
# SPDX-License-Identifier: Apache-2.0
"""
Asynchronous graph commands for any asyncio Redis connection.

The graph query is implemented once, as a coroutine function taking the
connection first. ``AsyncGraphCommands`` exposes the same implementation
as a method on whatever asyncio client it is mixed into.

Usage
-----
    import redis.asyncio as redis
    from redisgraph_commands import GraphResultSet, graph_query

    con = redis.from_url("redis://127.0.0.1/")
    res: GraphResultSet = await graph_query(
        con,
        "my_graph",
        "CREATE (:Rider {name:'Valentino Rossi'})-[:rides]->(:Team {name:'Yamaha'})",
    )

or, with the mixin:

    class MyRedis(AsyncGraphCommands, redis.Redis):
        pass

    res = await MyRedis().graph_query("my_graph", "MATCH (r:Rider) RETURN r.name")

Calling either form returns a coroutine (the pending operation). Nothing is
sent until it is awaited or scheduled as a task; cancelling that task
abandons the request according to the connection's own cancellation
behavior. The connection must not be used by another command until the
coroutine completes.
"""

from __future__ import annotations

from typing import Any, Coroutine

from .command import Arg, AsyncConnectionLike, cmd
from .graph_types import GraphResultSet

GRAPH_QUERY = "GRAPH.QUERY"
GRAPH_RO_QUERY = "GRAPH.RO_QUERY"


async def graph_query(connection: AsyncConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
    """
    Run ``GRAPH.QUERY key query`` and decode the reply.

    Args:
        connection: Any object with an async ``execute_command``.
        key: Name of the graph.
        query: Cypher query text.

    Raises:
        ArgumentEncodingError: key or query is not encodable.
        ReplyDecodeError: reply is not a graph result set.
        redis.RedisError: anything raised by the connection, unchanged.
    """
    return await cmd(GRAPH_QUERY).arg(key).arg(query).query_async(connection, GraphResultSet)


async def graph_ro_query(connection: AsyncConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
    """Read-only variant (``GRAPH.RO_QUERY``); same contract as graph_query."""
    return await cmd(GRAPH_RO_QUERY).arg(key).arg(query).query_async(connection, GraphResultSet)


class AsyncGraphCommands:
    """
    Mixin adding graph commands to an asyncio connection-like class.

    The host class must provide an async ``execute_command``.
    """

    def graph_query(
        self: AsyncConnectionLike, key: Arg, query: Arg
    ) -> Coroutine[Any, Any, GraphResultSet]:
        return graph_query(self, key, query)

    def graph_ro_query(
        self: AsyncConnectionLike, key: Arg, query: Arg
    ) -> Coroutine[Any, Any, GraphResultSet]:
        return graph_ro_query(self, key, query)


__all__ = [
    "GRAPH_QUERY",
    "GRAPH_RO_QUERY",
    "AsyncGraphCommands",
    "graph_query",
    "graph_ro_query",
]
