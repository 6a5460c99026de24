# SPDX-License-Identifier: Apache-2.0
"""
Demonstrates: graph_query against a live RedisGraph / FalkorDB server
Expected: prints creation statistics, then the rider/team rows

Server URL comes from --url, else $REDISGRAPH_URL, else redis://localhost:6379/0.
"""
import argparse
import asyncio

from redisgraph_commands import connect

RIDER_QUERY = "CREATE (:Rider {name:'Valentino Rossi'})-[:rides]->(:Team {name:'Yamaha'})"


async def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--url", default=None)
    ap.add_argument("--graph", default="my_graph")
    args = ap.parse_args()

    con = connect(args.url, socket_timeout=5)
    try:
        created = await con.graph_query(args.graph, RIDER_QUERY)
        print(dict(created.statistics))

        res = await con.graph_ro_query(args.graph, "MATCH (r:Rider)-[:rides]->(t:Team) RETURN r.name, t.name")
        for row in res:
            print(row)
    finally:
        await con.connection_pool.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
