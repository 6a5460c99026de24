# SPDX-License-Identifier: Apache-2.0
"""
redisgraph-commands test suite.

Runs entirely against in-memory mock connections; no Redis server needed.
"""
