# SPDX-License-Identifier: Apache-2.0
"""
Command requests: builder and argument encoding.
"""
import pytest
from redis.exceptions import DataError

from redisgraph_commands import ArgumentEncodingError, Cmd, GraphResultSet, cmd, encode_arg
from redisgraph_commands.mock.mock_connection import (
    EMPTY_RESULT_REPLY,
    MockAsyncConnection,
    MockConnection,
)


def test_cmd_builds_ordered_wire_tuple():
    request = cmd("GRAPH.QUERY").arg("g").arg("RETURN 1")

    assert request.name == "GRAPH.QUERY"
    assert request.args == ("GRAPH.QUERY", b"g", b"RETURN 1")


def test_arg_returns_same_request_for_chaining():
    request = Cmd("PING")
    assert request.arg("x") is request


def test_repr_hides_argument_values():
    request = cmd("GRAPH.QUERY").arg("tenant-secret").arg("MATCH (n) RETURN n")

    text = repr(request)
    assert "tenant-secret" not in text
    assert "nargs=2" in text


@pytest.mark.parametrize("name", ["", None, 7])
def test_cmd_requires_non_empty_name(name):
    with pytest.raises(ValueError):
        Cmd(name)


@pytest.mark.parametrize(
    "value",
    [None, True, False, ["a"], {"a": 1}, object(), bytearray(b"x"), "\ud800"],
)
def test_unencodable_values_are_rejected(value):
    with pytest.raises(ArgumentEncodingError) as exc_info:
        encode_arg(value)

    err = exc_info.value
    assert isinstance(err, DataError)
    assert err.code == "ARGUMENT_ENCODING"
    assert err.details == {"type": type(value).__name__}


def test_encode_arg_returns_bytes():
    assert encode_arg("é") == "é".encode("utf-8")
    assert encode_arg(memoryview(b"abc")) == b"abc"
    assert isinstance(encode_arg(memoryview(b"abc")), bytes)
    assert encode_arg(-3) == b"-3"


@pytest.mark.asyncio
async def test_query_async_without_result_type_returns_raw_reply():
    con = MockAsyncConnection()
    con.script("PING", reply=b"PONG")

    assert await cmd("PING").query_async(con) == b"PONG"
    assert con.sent == [("PING",)]


def test_query_decodes_with_result_type():
    con = MockConnection()
    con.script("GRAPH.QUERY", "g", "RETURN 1", reply=EMPTY_RESULT_REPLY)

    res = cmd("GRAPH.QUERY").arg("g").arg("RETURN 1").query(con, GraphResultSet)
    assert res == GraphResultSet.from_reply(EMPTY_RESULT_REPLY)
