# redisgraph_commands/graph/commands.py
# SPDX-License-Identifier: Apache-2.0
"""
Blocking graph commands for ``redis.Redis`` style connections.

Same contract as the asyncio commands, executed with a direct call to
``execute_command`` instead of an await.
"""

from __future__ import annotations

from .async_commands import GRAPH_QUERY, GRAPH_RO_QUERY
from .command import Arg, ConnectionLike, cmd
from .graph_types import GraphResultSet


def graph_query(connection: ConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
    """Run ``GRAPH.QUERY key query`` on a blocking connection."""
    return cmd(GRAPH_QUERY).arg(key).arg(query).query(connection, GraphResultSet)


def graph_ro_query(connection: ConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
    return cmd(GRAPH_RO_QUERY).arg(key).arg(query).query(connection, GraphResultSet)


class GraphCommands:
    """Mixin adding graph commands to a blocking connection-like class."""

    def graph_query(self: ConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
        return graph_query(self, key, query)

    def graph_ro_query(self: ConnectionLike, key: Arg, query: Arg) -> GraphResultSet:
        return graph_ro_query(self, key, query)


__all__ = ["GraphCommands", "graph_query", "graph_ro_query"]
