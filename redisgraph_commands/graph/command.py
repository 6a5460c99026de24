# redisgraph_commands/graph/command.py
# SPDX-License-Identifier: Apache-2.0
"""
Command requests and the connection-like capability.

A ``Cmd`` is the in-memory form of one remote operation: a command name
followed by ordered positional arguments, each already encoded the way
redis-py encodes bulk strings. It is executed over any object exposing a
redis-py style ``execute_command(*args)``:

    request = cmd("GRAPH.QUERY").arg("my_graph").arg("MATCH (n) RETURN n")
    result = await request.query_async(connection, GraphResultSet)

The request is handed to the connection exactly once. Errors raised by the
connection propagate unchanged.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, List, Optional, Protocol, Tuple, Type, Union, runtime_checkable

from redis.connection import Encoder
from redis.exceptions import DataError

from .errors import ArgumentEncodingError

LOG = logging.getLogger(__name__)

# Matches the default encoding of redis.Redis / redis.asyncio.Redis.
_ENCODER = Encoder(encoding="utf-8", encoding_errors="strict", decode_responses=False)

Arg = Union[str, bytes, memoryview, int, float]
"""Any value redis-py can send as a single bulk string."""


@runtime_checkable
class AsyncConnectionLike(Protocol):
    """
    Capability an asyncio transport must have to run graph commands.

    ``redis.asyncio.Redis``, ``redis.asyncio.RedisCluster`` and their
    subclasses satisfy it. Implementations must not be shared between two
    in-flight commands unless the transport itself allows it.
    """

    async def execute_command(self, *args: Any, **options: Any) -> Any:
        ...


@runtime_checkable
class ConnectionLike(Protocol):
    """Blocking twin of AsyncConnectionLike (``redis.Redis`` and friends)."""

    def execute_command(self, *args: Any, **options: Any) -> Any:
        ...


@runtime_checkable
class FromReply(Protocol):
    """A result type that knows how to decode itself from a raw reply."""

    @classmethod
    def from_reply(cls, reply: Any) -> Any:
        ...


def encode_arg(value: Any) -> bytes:
    """
    Encode one positional argument to bytes.

    Raises ArgumentEncodingError for values redis-py refuses to send
    (bool, None, containers, arbitrary objects), for bytearray, and for
    str values that are not valid utf-8 (lone surrogates).
    """
    # older redis-py releases refuse bytearray, newer ones pass it through
    if isinstance(value, bytearray):
        raise ArgumentEncodingError(
            "argument cannot be encoded as a bulk string",
            details={"type": type(value).__name__},
        )
    try:
        encoded = _ENCODER.encode(value)
    except (DataError, UnicodeEncodeError) as e:
        raise ArgumentEncodingError(
            "argument cannot be encoded as a bulk string",
            details={"type": type(value).__name__},
        ) from e
    return bytes(encoded)


class Cmd:
    """
    One command request: a name plus ordered, encoded arguments.

    Built per call and discarded after execution. ``arg`` returns the
    same instance so requests read left to right.
    """

    __slots__ = ("_name", "_args")

    def __init__(self, name: str) -> None:
        if not name or not isinstance(name, str):
            raise ValueError("command name must be a non-empty string")
        self._name = name
        self._args: List[bytes] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def args(self) -> Tuple[Any, ...]:
        """
        Full wire form: command name first, then the encoded arguments in order.

        The name stays a str so redis-py can match its response callbacks.
        """
        return (self._name, *self._args)

    def arg(self, value: Arg) -> "Cmd":
        self._args.append(encode_arg(value))
        return self

    def __repr__(self) -> str:
        # argument values may carry tenant data; only the count is shown
        return f"Cmd({self._name!r}, nargs={len(self._args)})"

    async def query_async(
        self,
        connection: AsyncConnectionLike,
        result_type: Optional[Type[FromReply]] = None,
    ) -> Any:
        """
        Send the request over an asyncio connection and decode the reply.

        The await on ``connection.execute_command`` is the only suspension
        point. With ``result_type=None`` the raw reply is returned.
        """
        LOG.debug("dispatching %s (nargs=%d)", self._name, len(self._args))
        pending = connection.execute_command(*self.args)
        if not inspect.isawaitable(pending):
            raise TypeError(
                f"{type(connection).__name__}.execute_command is not awaitable; "
                "use the blocking graph commands for synchronous connections"
            )
        reply = await pending
        return _decode_reply(reply, result_type)

    def query(
        self,
        connection: ConnectionLike,
        result_type: Optional[Type[FromReply]] = None,
    ) -> Any:
        """Blocking counterpart of query_async."""
        LOG.debug("dispatching %s (nargs=%d)", self._name, len(self._args))
        reply = connection.execute_command(*self.args)
        return _decode_reply(reply, result_type)


def _decode_reply(reply: Any, result_type: Optional[Type[FromReply]]) -> Any:
    if result_type is None:
        return reply
    return result_type.from_reply(reply)


def cmd(name: str) -> Cmd:
    """Start a new command request."""
    return Cmd(name)


__all__ = [
    "Arg",
    "AsyncConnectionLike",
    "ConnectionLike",
    "FromReply",
    "Cmd",
    "cmd",
    "encode_arg",
]
