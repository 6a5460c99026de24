# redisgraph_commands/graph/graph_types.py
# SPDX-License-Identifier: Apache-2.0
"""
Result set returned by GRAPH.QUERY / GRAPH.RO_QUERY.

Reply shapes
------------
A graph query reply is one of:

    [metadata]                    # query without RETURN (pure writes)
    [header, rows, metadata]      # query with RETURN

where

    header   = [name, ...]            (verbose mode)
             | [[column_type, name], ...]  (compact mode)
    rows     = [[cell, ...], ...]     one cell per header column
    metadata = ["Nodes created: 2", "Query internal execution time: 0.3 milliseconds", ...]

Cells are kept opaque: nodes, relations and paths stay in whatever nested
list form the server sent, with bytes decoded to str.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Sequence

from redis.exceptions import ResponseError

from .errors import ReplyDecodeError


def _decode(value: Any) -> Any:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ReplyDecodeError(
                "graph reply contains non-utf-8 bytes",
                details={"position": e.start},
            ) from e
    if isinstance(value, (list, tuple)):
        return [_decode(v) for v in value]
    return value


def _column_name(entry: Any, idx: int) -> str:
    # compact mode sends [column_type, name]
    if isinstance(entry, (list, tuple)):
        if len(entry) != 2:
            raise ReplyDecodeError(
                "malformed header entry", details={"column": idx, "size": len(entry)}
            )
        entry = entry[1]
    name = _decode(entry)
    if not isinstance(name, str):
        raise ReplyDecodeError(
            "header entry is not a column name",
            details={"column": idx, "type": type(name).__name__},
        )
    return name


def _as_list(value: Any, what: str) -> Sequence[Any]:
    if not isinstance(value, (list, tuple)):
        raise ReplyDecodeError(
            f"graph reply {what} must be an array",
            details={"type": type(value).__name__},
        )
    return value


@dataclass
class GraphResultSet:
    """
    Decoded graph query result.

    Attributes:
        header: Column names, in RETURN order.
        data: One mapping per row, keyed by column name.
        metadata: Raw statistics lines reported by the server.
    """
    header: List[str] = field(default_factory=list)
    data: List[Dict[str, Any]] = field(default_factory=list)
    metadata: List[str] = field(default_factory=list)

    @classmethod
    def from_reply(cls, reply: Any) -> "GraphResultSet":
        """Decode a raw GRAPH.QUERY reply; raises ReplyDecodeError on bad shapes."""
        if isinstance(reply, cls):
            return reply

        parts = _as_list(reply, "reply")
        # runtime failures (division by zero, timeouts) arrive embedded in the reply
        for section in (parts[0], parts[-1]) if parts else ():
            if isinstance(section, ResponseError):
                raise section
        if len(parts) == 1:
            return cls(metadata=cls._decode_metadata(parts[0]))
        if len(parts) != 3:
            raise ReplyDecodeError(
                "graph reply must have 1 or 3 sections", details={"sections": len(parts)}
            )

        raw_header, raw_rows, raw_metadata = parts
        header = [_column_name(h, i) for i, h in enumerate(_as_list(raw_header, "header"))]

        data: List[Dict[str, Any]] = []
        for row_idx, raw_row in enumerate(_as_list(raw_rows, "rows")):
            row = _as_list(raw_row, "row")
            if len(row) != len(header):
                raise ReplyDecodeError(
                    "row width does not match header",
                    details={"row": row_idx, "cells": len(row), "columns": len(header)},
                )
            data.append({name: _decode(cell) for name, cell in zip(header, row)})

        return cls(header=header, data=data, metadata=cls._decode_metadata(raw_metadata))

    @staticmethod
    def _decode_metadata(raw: Any) -> List[str]:
        lines = []
        for line in _as_list(raw, "metadata"):
            text = _decode(line)
            if not isinstance(text, str):
                raise ReplyDecodeError(
                    "metadata entries must be strings",
                    details={"type": type(text).__name__},
                )
            lines.append(text)
        return lines

    @property
    def statistics(self) -> Mapping[str, str]:
        """Metadata lines split into ``{"Nodes created": "2", ...}``."""
        stats: Dict[str, str] = {}
        for line in self.metadata:
            label, sep, value = line.partition(":")
            if sep:
                stats[label.strip()] = value.strip()
        return stats

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self.data)


def parse_graph_reply(response: Any, **options: Any) -> GraphResultSet:
    """redis-py response callback for GRAPH.QUERY / GRAPH.RO_QUERY."""
    return GraphResultSet.from_reply(response)


__all__ = ["GraphResultSet", "parse_graph_reply"]
