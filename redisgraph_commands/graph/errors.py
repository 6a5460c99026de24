# redisgraph_commands/graph/errors.py
# SPDX-License-Identifier: Apache-2.0
"""
Normalized errors for graph commands.

Two fault kinds reach callers of the graph extension:

- transport: the request never made a clean round trip
  (connection broken, socket timeout, I/O fault, argument not encodable)
- protocol: the server answered, but with an error reply or a reply
  shape that cannot be decoded into the expected result type

Both kinds originate in the Redis client (redis-py). This module only adds
the two faults the extension itself can detect (argument encoding and reply
decoding) and slots them into the matching ``redis.exceptions`` class, so a
plain ``except redis.RedisError`` catches everything uniformly.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    DataError,
    InvalidResponse,
    ResponseError,
    TimeoutError as RedisTimeoutError,
)

TRANSPORT = "transport"
PROTOCOL = "protocol"


class GraphCommandError(Exception):
    """
    Base exception for errors raised by this package.

    Attributes:
        message: Human-readable description.
        code: Machine-readable, UPPER_SNAKE_CASE error code.
        details: Additional machine context (never argument values).
    """
    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = dict(details or {})

    def __str__(self) -> str:
        base = self.message or self.__class__.__name__
        if self.code:
            base += f" [code={self.code}]"
        if self.details:
            base += f" details={self.details}"
        return base


class ArgumentEncodingError(GraphCommandError, DataError):
    """A command argument cannot be encoded as a Redis bulk string."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "ARGUMENT_ENCODING")
        super().__init__(message, **kw)


class ReplyDecodeError(GraphCommandError, ResponseError):
    """The server reply does not have the shape of the requested result type."""
    def __init__(self, message: str, **kw: Any):
        kw.setdefault("code", "BAD_REPLY")
        super().__init__(message, **kw)


def fault_kind(exc: BaseException) -> Optional[str]:
    """
    Classify an exception raised by a graph command.

    Returns ``"transport"``, ``"protocol"`` or None when the exception is
    neither (programming errors, cancellation).
    """
    if isinstance(exc, (DataError, RedisConnectionError, RedisTimeoutError)):
        return TRANSPORT
    if isinstance(exc, (ResponseError, InvalidResponse)):
        return PROTOCOL
    # redis-py raises builtin OSError subclasses from socket reads in a few paths
    if isinstance(exc, OSError):
        return TRANSPORT
    return None


__all__ = [
    "TRANSPORT",
    "PROTOCOL",
    "GraphCommandError",
    "ArgumentEncodingError",
    "ReplyDecodeError",
    "fault_kind",
]
