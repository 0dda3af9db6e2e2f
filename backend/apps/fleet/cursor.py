"""
Cursor encoding/decoding for roster pagination.

Cursors are opaque to clients but encode (created_at, id) of the last row
on the previous page, giving stable ordering when timestamps collide.
"""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from datetime import datetime


class CursorInvalidError(ValueError):
    """Raised when cursor cannot be decoded or is malformed."""


@dataclass(frozen=True)
class PageCursor:
    """
    Decoded cursor.

    Attributes:
        created_at: Creation time of the last seen row
        row_id: Id of the last seen row (tiebreaker)
    """

    created_at: datetime
    row_id: str


def encode_cursor(created_at: datetime, row_id: str) -> str:
    """Encode a cursor as URL-safe base64 JSON."""
    data = {"ts": created_at.isoformat(), "id": row_id}
    return base64.urlsafe_b64encode(json.dumps(data, separators=(",", ":")).encode()).decode()


def decode_cursor(cursor: str) -> PageCursor:
    """
    Decode a cursor from the client.

    Raises:
        CursorInvalidError: If cursor cannot be decoded or is malformed
    """
    try:
        data = json.loads(base64.urlsafe_b64decode(cursor.encode()).decode())
        return PageCursor(created_at=datetime.fromisoformat(data["ts"]), row_id=str(data["id"]))
    except (ValueError, KeyError, TypeError) as e:
        raise CursorInvalidError(f"Invalid cursor format: {e}") from e
