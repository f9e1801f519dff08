"""Tests for the thumbnail blob cache."""

from __future__ import annotations

import pytest

from folio import Storage, Thumbnail, UniquenessViolation

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


class TestThumbnails:
    def test_round_trip(self, store: Storage) -> None:
        store.save_thumbnail("id-1", PNG_BYTES, "thumbnail.png", "image/png", len(PNG_BYTES))
        thumbnail = store.get_thumbnail("id-1")
        assert thumbnail == Thumbnail(PNG_BYTES, "thumbnail.png", "image/png", len(PNG_BYTES))
        assert isinstance(thumbnail.data, bytes)

    def test_missing(self, store: Storage) -> None:
        assert store.get_thumbnail("id-1") is None

    def test_no_overwrite(self, store: Storage) -> None:
        store.save_thumbnail("id-1", PNG_BYTES, "first.png", "image/png", len(PNG_BYTES))
        with pytest.raises(UniquenessViolation):
            store.save_thumbnail("id-1", b"other", "second.jpg", "image/jpeg", 5)
        assert store.get_thumbnail("id-1").filename == "first.png"

    def test_empty_blob(self, store: Storage) -> None:
        store.save_thumbnail("id-1", b"", "empty.png", "image/png", 0)
        assert store.get_thumbnail("id-1").data == b""

    def test_to_dict(self) -> None:
        thumbnail = Thumbnail(b"abc", "a.png", "image/png", 3)
        assert Thumbnail.from_dict(thumbnail.to_dict()) == thumbnail
