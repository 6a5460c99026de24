# SPDX-License-Identifier: Apache-2.0
"""In-memory connections for exercising graph commands without a server."""

from .mock_connection import (
    EMPTY_RESULT_REPLY,
    BorrowConflict,
    MockAsyncConnection,
    MockAsyncGraphConnection,
    MockConnection,
    MockGraphConnection,
)

__all__ = [
    "EMPTY_RESULT_REPLY",
    "BorrowConflict",
    "MockAsyncConnection",
    "MockAsyncGraphConnection",
    "MockConnection",
    "MockGraphConnection",
]
