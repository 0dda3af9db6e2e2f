"""
Tests for roster cursor encoding.
"""

from datetime import UTC, datetime

import pytest

from apps.fleet.cursor import CursorInvalidError, decode_cursor, encode_cursor


class TestCursor:
    def test_decode_returns_position(self) -> None:
        ts = datetime(2025, 3, 1, 12, 30, 15, 123456, tzinfo=UTC)

        position = decode_cursor(encode_cursor(ts, "0b6c9a1e-5a4f-4d7e-9a52-0f1f1a2b3c4d"))

        assert position.created_at == ts
        assert position.row_id == "0b6c9a1e-5a4f-4d7e-9a52-0f1f1a2b3c4d"

    def test_cursor_is_url_safe(self) -> None:
        cursor = encode_cursor(datetime(2025, 1, 1, tzinfo=UTC), "x" * 40)
        assert "+" not in cursor and "/" not in cursor

    @pytest.mark.parametrize("cursor", ["", "not-base64!!", "eyJ0cyI6IDF9", "W10="])
    def test_malformed_cursor(self, cursor: str) -> None:
        with pytest.raises(CursorInvalidError):
            decode_cursor(cursor)
