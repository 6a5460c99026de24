# SPDX-License-Identifier: Apache-2.0
"""
Graph commands: emitted command shape.

Asserts:
  • GRAPH.QUERY name, then key, then query, nothing else
  • argument types are normalized to bytes before reaching the transport
  • the read-only variant emits GRAPH.RO_QUERY with the same layout
"""
import pytest

from redisgraph_commands import GraphResultSet, graph_query, graph_ro_query
from redisgraph_commands.mock.mock_connection import EMPTY_RESULT_REPLY

pytestmark = [pytest.mark.asyncio, pytest.mark.shape]

RIDER_QUERY = "CREATE (:Rider {name:'Valentino Rossi'})-[:rides]->(:Team {name:'Yamaha'})"


async def test_graph_query_emits_name_key_query_in_order(connection):
    await graph_query(connection, "social", "MATCH (n) RETURN n")

    assert connection.sent == [("GRAPH.QUERY", b"social", b"MATCH (n) RETURN n")]


async def test_rider_example_resolves_to_canned_result(connection):
    connection.script("GRAPH.QUERY", "my_graph", RIDER_QUERY, reply=EMPTY_RESULT_REPLY)

    res = await graph_query(connection, "my_graph", RIDER_QUERY)

    assert connection.sent == [("GRAPH.QUERY", b"my_graph", RIDER_QUERY.encode())]
    assert isinstance(res, GraphResultSet)
    assert res == GraphResultSet.from_reply(EMPTY_RESULT_REPLY)
    assert len(res) == 0


@pytest.mark.parametrize(
    "key, expected",
    [
        ("g1", b"g1"),
        (b"g1", b"g1"),
        (memoryview(b"g1"), b"g1"),
        (42, b"42"),
        (1.5, b"1.5"),
        ("grafo-ñ", "grafo-ñ".encode("utf-8")),
    ],
)
async def test_argument_types_are_normalized(connection, key, expected):
    await graph_query(connection, key, b"RETURN 1")

    name, sent_key, sent_query = connection.sent[0]
    assert name == "GRAPH.QUERY"
    assert sent_key == expected
    assert sent_query == b"RETURN 1"


async def test_ro_query_uses_read_only_command(connection):
    await graph_ro_query(connection, "social", "MATCH (n) RETURN count(n)")

    assert connection.sent == [("GRAPH.RO_QUERY", b"social", b"MATCH (n) RETURN count(n)")]


async def test_each_call_sends_exactly_one_request(connection):
    await graph_query(connection, "g", "RETURN 1")
    await graph_query(connection, "g", "RETURN 2")

    assert [args[2] for args in connection.sent] == [b"RETURN 1", b"RETURN 2"]
    assert connection.consumed == 2
