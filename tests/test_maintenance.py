"""Tests for optimize(): dangling ID and orphaned thumbnail cleanup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from folio import OptimizeReport, Storage


@pytest.fixture
def library(tmp_path: Path) -> Path:
    root = tmp_path / "library"
    root.mkdir()
    return root


class TestOptimize:
    def test_removes_dangling_ids_and_their_thumbnails(self, store: Storage, library: Path) -> None:
        kept = library / "kept.zip"
        kept.write_bytes(b"zip")
        gone = library / "gone.zip"

        store.enqueue(str(kept), "kept-id", False)
        store.enqueue(str(gone), "gone-id", False)
        store.flush()
        store.save_thumbnail("kept-id", b"k", "k.png", "image/png", 1)
        store.save_thumbnail("gone-id", b"g", "g.png", "image/png", 1)

        report = store.optimize()

        assert report == OptimizeReport(dangling_ids=1, orphaned_thumbnails=1)
        assert store.get_id(str(kept)) == "kept-id"
        assert store.get_id(str(gone)) is None
        assert store.get_thumbnail("kept-id") is not None
        assert store.get_thumbnail("gone-id") is None

    def test_removes_thumbnail_without_any_id(self, store: Storage, library: Path) -> None:
        kept = library / "kept.zip"
        kept.write_bytes(b"zip")
        store.enqueue(str(kept), "kept-id", False)
        store.flush()
        store.save_thumbnail("never-registered", b"x", "x.png", "image/png", 1)

        report = store.optimize()

        assert report == OptimizeReport(dangling_ids=0, orphaned_thumbnails=1)
        assert store.get_thumbnail("never-registered") is None
        assert store.get_id(str(kept)) == "kept-id"

    def test_directories_count_as_existing(self, store: Storage, library: Path) -> None:
        title = library / "Title"
        title.mkdir()
        store.enqueue(str(title), "title-id", True)
        store.flush()
        assert store.optimize() == OptimizeReport()
        assert store.get_id(str(title)) == "title-id"

    def test_second_run_finds_nothing(self, store: Storage, library: Path) -> None:
        store.enqueue(str(library / "gone.zip"), "gone-id", False)
        store.flush()
        store.optimize()
        assert store.optimize() == OptimizeReport()

    def test_many_dangling_ids(self, store: Storage, library: Path) -> None:
        for i in range(1200):
            store.enqueue(str(library / f"missing-{i}.zip"), f"id-{i}", False)
        store.flush()
        assert store.optimize().dangling_ids == 1200
        assert store.get_id(str(library / "missing-0.zip")) is None

    def test_counts_are_logged(
        self, store: Storage, library: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        store.save_thumbnail("orphan", b"x", "x.png", "image/png", 1)
        with caplog.at_level(logging.INFO, logger="folio"):
            store.optimize()
        messages = [r.getMessage() for r in caplog.records]
        assert "Starting DB optimization" in messages
        assert "1 dangling thumbnails deleted" in messages

    def test_report_to_dict(self) -> None:
        assert OptimizeReport(2, 3).to_dict() == {"dangling_ids": 2, "orphaned_thumbnails": 3}
