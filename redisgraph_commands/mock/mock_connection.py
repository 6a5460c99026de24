# redisgraph_commands/mock/mock_connection.py
# SPDX-License-Identifier: Apache-2.0
"""
Scripted in-memory connections for tests and examples.

They record every command they receive, answer from a script keyed by the
exact wire arguments, and keep counters that let tests observe in-flight,
abandoned and completed requests. No Redis server is involved.

    con = MockAsyncConnection()
    con.script("GRAPH.QUERY", "my_graph", "MATCH (n) RETURN n", reply=[[], [], []])
    await graph_query(con, "my_graph", "MATCH (n) RETURN n")
    assert con.sent == [("GRAPH.QUERY", b"my_graph", b"MATCH (n) RETURN n")]
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from redis.exceptions import ResponseError

from redisgraph_commands.graph.async_commands import AsyncGraphCommands
from redisgraph_commands.graph.command import encode_arg
from redisgraph_commands.graph.commands import GraphCommands

WireKey = Tuple[Any, ...]

EMPTY_RESULT_REPLY: List[Any] = [
    [],
    [],
    [b"Cached execution: 0", b"Query internal execution time: 0.050000 milliseconds"],
]


class BorrowConflict(RuntimeError):
    """Raised by an exclusive mock when a second command overlaps the first."""


def _wire_key(name: str, args: Tuple[Any, ...]) -> WireKey:
    return (name.upper(), *(encode_arg(a) for a in args))


class _ScriptedReplies:
    """Reply script shared by the async and blocking mocks."""

    def __init__(self, *, default_reply: Any = None) -> None:
        self.default_reply = default_reply
        self.sent: List[WireKey] = []
        self.consumed = 0
        self._script: Dict[WireKey, Any] = {}

    def script(self, name: str, *args: Any, reply: Any) -> None:
        """
        Answer ``name *args`` with ``reply``.

        An exception instance as reply is raised instead of returned.
        """
        self._script[_wire_key(name, args)] = reply

    def _lookup(self, args: Tuple[Any, ...]) -> Any:
        key = (str(args[0]).upper(), *args[1:])
        if key in self._script:
            return self._script[key]
        if self.default_reply is not None:
            return self.default_reply
        return ResponseError(f"ERR unscripted command '{args[0]}'")

    def _deliver(self, reply: Any) -> Any:
        if isinstance(reply, BaseException):
            raise reply
        self.consumed += 1
        return reply


class MockAsyncConnection(_ScriptedReplies):
    """
    asyncio connection-like mock.

    Args:
        default_reply: Reply for unscripted commands (otherwise ResponseError).
        exclusive: Raise BorrowConflict when a command arrives while another
            is still in flight.
        latency_s: Simulated round-trip time.
    """

    def __init__(
        self,
        *,
        default_reply: Any = None,
        exclusive: bool = True,
        latency_s: float = 0.0,
    ) -> None:
        super().__init__(default_reply=default_reply)
        self.exclusive = exclusive
        self.latency_s = latency_s
        self.in_flight = 0
        self.abandoned = 0
        self._gate: Optional[asyncio.Event] = None

    def hold(self) -> asyncio.Event:
        """Park every request until the returned event is set."""
        self._gate = asyncio.Event()
        return self._gate

    async def execute_command(self, *args: Any, **options: Any) -> Any:
        if self.exclusive and self.in_flight:
            raise BorrowConflict(f"connection already busy with {self.in_flight} command(s)")
        self.in_flight += 1
        self.sent.append(tuple(args))
        try:
            if self._gate is not None:
                await self._gate.wait()
            elif self.latency_s:
                await asyncio.sleep(self.latency_s)
            reply = self._lookup(args)
        except asyncio.CancelledError:
            self.abandoned += 1
            raise
        finally:
            self.in_flight -= 1
        return self._deliver(reply)


class MockConnection(_ScriptedReplies):
    """Blocking connection-like mock."""

    def execute_command(self, *args: Any, **options: Any) -> Any:
        self.sent.append(tuple(args))
        return self._deliver(self._lookup(args))


class MockAsyncGraphConnection(AsyncGraphCommands, MockAsyncConnection):
    """MockAsyncConnection with the graph commands mixed in."""


class MockGraphConnection(GraphCommands, MockConnection):
    """MockConnection with the graph commands mixed in."""


__all__ = [
    "EMPTY_RESULT_REPLY",
    "BorrowConflict",
    "MockAsyncConnection",
    "MockConnection",
    "MockAsyncGraphConnection",
    "MockGraphConnection",
]
