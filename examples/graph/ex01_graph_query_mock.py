# SPDX-License-Identifier: Apache-2.0
"""
Demonstrates: graph_query over a scripted in-memory connection
Expected: prints the emitted command, the decoded rows, then the two fault kinds
"""
import asyncio
import logging

from redis.exceptions import ConnectionError as RedisConnectionError, ResponseError

from redisgraph_commands import fault_kind, graph_query
from redisgraph_commands.mock import MockAsyncGraphConnection

RIDER_QUERY = "CREATE (:Rider {name:'Valentino Rossi'})-[:rides]->(:Team {name:'Yamaha'})"


async def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    con = MockAsyncGraphConnection()
    con.script("GRAPH.QUERY", "my_graph", RIDER_QUERY, reply=[[b"Nodes created: 2", b"Relationships created: 1"]])
    con.script(
        "GRAPH.QUERY", "my_graph", "MATCH (r:Rider)-[:rides]->(t:Team) RETURN r.name, t.name",
        reply=[[b"r.name", b"t.name"], [[b"Valentino Rossi", b"Yamaha"]], [b"Cached execution: 0"]],
    )
    con.script("GRAPH.QUERY", "my_graph", "MATCH (", reply=ResponseError("errMsg: Invalid input"))
    con.script("GRAPH.QUERY", "down", "RETURN 1", reply=RedisConnectionError("Connection closed by server."))

    created = await con.graph_query("my_graph", RIDER_QUERY)
    print("sent:", con.sent[0])
    print("stats:", dict(created.statistics))

    rows = await graph_query(con, "my_graph", "MATCH (r:Rider)-[:rides]->(t:Team) RETURN r.name, t.name")
    for row in rows:
        print("row:", row)

    for key, query in (("my_graph", "MATCH ("), ("down", "RETURN 1")):
        try:
            await graph_query(con, key, query)
        except Exception as e:
            print(f"{fault_kind(e)} fault: {type(e).__name__}: {e}")


if __name__ == "__main__":
    asyncio.run(main())
